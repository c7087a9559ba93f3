""" Builds date and datetime values from raw picker fields.

    Year comes from a free text field, all other components come from
    dropdowns with fixed integer ranges.
"""
import datetime
import re

# inclusive bounds of dropdown choices
MONTHS = (1, 12)
DAYS = (1, 31)
HOURS = (0, 23)
MINUTES = (0, 59)
SECONDS = (0, 59)

_int_re = re.compile(r'^[+-]?[0-9]+$')
_year_digits = len(str(datetime.MAXYEAR))


class InvalidInputError(ValueError):
    'picker fields do not form a valid value'
    kind = None


class NotANumberError(InvalidInputError):
    kind = 'NotANumber'


class InvalidCalendarDateError(InvalidInputError):
    kind = 'InvalidCalendarDate'


def parse_year(text):
    '->int. Raises NotANumberError, InvalidCalendarDateError'
    s = (text or '').strip()
    if not _int_re.match(s):
        raise NotANumberError('Year is not a number: %r' % text)
    digits = s.lstrip('+-').lstrip('0') or '0'
    # datetime years have at most 4 digits
    if len(digits) > _year_digits:
        raise InvalidCalendarDateError('Year is out of range: %.20s...' % s)
    return -int(digits) if s.startswith('-') else int(digits)


def _check_range(name, value, bounds):
    if not bounds[0] <= value <= bounds[1]:
        raise InvalidCalendarDateError(
            '%s %s is out of range [%i, %i]' % (name, value, bounds[0],
                                                bounds[1]))


def compose_date(year, month, day):
    """ -> datetime.date
        year - raw text of the year field, month, day - ints.
        Raises NotANumberError, InvalidCalendarDateError
    """
    y = parse_year(year)
    _check_range('Month', month, MONTHS)
    _check_range('Day', day, DAYS)
    try:
        return datetime.date(y, month, day)
    except (ValueError, OverflowError) as e:
        raise InvalidCalendarDateError(
            'Invalid date %s-%s-%s: %s' % (y, month, day, e))


def compose_date_time(year, month, day, hour, minute, second):
    """ -> datetime.datetime
        Same as compose_date with time components added
    """
    date = compose_date(year, month, day)
    _check_range('Hour', hour, HOURS)
    _check_range('Minute', minute, MINUTES)
    _check_range('Second', second, SECONDS)
    return datetime.datetime(date.year, date.month, date.day,
                             hour, minute, second)

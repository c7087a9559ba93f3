from . import compose
from .dlg_date import DatePicker


class DateTimePicker(DatePicker):
    """ DatePicker with hour, minute and second fields.
        Produces datetime.datetime
    """
    caption = "Datetime input"
    now_caption = "Get current time"
    error_text = "Invalid date/time input"

    def setUi(self):  # NOQA
        super(DateTimePicker, self).setUi()
        self.hourbox = self._add_combo('Hour', compose.HOURS)
        self.minutebox = self._add_combo('Minutes', compose.MINUTES)
        self.secondbox = self._add_combo('Seconds', compose.SECONDS)

    def field_values(self):
        ret = super(DateTimePicker, self).field_values()
        ret['hour'] = int(self.hourbox.currentText())
        ret['minute'] = int(self.minutebox.currentText())
        ret['second'] = int(self.secondbox.currentText())
        return ret

    def compose_value(self):
        '->datetime.datetime. Raises compose.InvalidInputError'
        return compose.compose_date_time(**self.field_values())

    def set_value(self, value):
        'fill fields from datetime object'
        super(DateTimePicker, self).set_value(value)
        self._select(self.hourbox, value.hour)
        self._select(self.minutebox, value.minute)
        self._select(self.secondbox, value.second)

import os
import os.path

progname = 'datepick'
version = '1.6'
working_directory = os.environ.get(
    'DATEPICK_HOME', os.path.join(os.path.expanduser('~'), '.datepick'))

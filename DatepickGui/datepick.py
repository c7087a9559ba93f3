#!/usr/bin/env python

import sys
from PyQt5 import QtWidgets
from . import bproc
from .dlg_date import DatePicker
from .dlg_datetime import DateTimePicker

pickers = {'date': DatePicker, 'datetime': DateTimePicker}


def usage():
    t = 'Usage: datepick [%s]\n' % '|'.join(sorted(pickers))
    t += '\tdate - pick a date (default)\n'
    t += '\tdatetime - pick a date and time\n'
    return t


def main(argv=None):
    argv = sys.argv if argv is None else argv
    kind = argv[1] if len(argv) > 1 else 'date'
    if kind not in pickers:
        sys.stderr.write(usage())
        return 1

    bproc.configure_logging()
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(argv)

    w = pickers[kind](lambda value: print(value.isoformat()))
    w.closed.connect(app.quit)
    w.show()

    # start gui loop
    return app.exec_()


if __name__ == '__main__':
    sys.exit(main())

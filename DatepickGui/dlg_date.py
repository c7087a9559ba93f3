import datetime
import logging
from PyQt5 import QtWidgets, QtCore, QtGui
from . import bproc, compose, pickopt

log = logging.getLogger(__name__)


class DatePicker(QtWidgets.QWidget):
    """ Window with year, month and day fields.
        The composed datetime.date is passed to callback on OK.
    """
    OPEN, CONFIRMED, CLOSED = 'Open', 'Confirmed', 'Closed'

    caption = "Date input"
    now_caption = "Get current date"
    error_text = "Invalid date input"

    # emitted with the composed value after callback was called
    confirmed = QtCore.pyqtSignal(object)
    # emitted when the window has been closed
    closed = QtCore.pyqtSignal()

    def __init__(self, callback=None, store=None, clock=None,
                 init_value=None, parent=None):
        """ callback - (value)->None
            store - pickopt.GeometryStore. Default store uses class name
                    as a namespace
            clock - ()->datetime.datetime. Default datetime.datetime.now
        """
        super(DatePicker, self).__init__(parent)
        self.callback = callback
        self.store = store if store is not None else \
            pickopt.default_store(type(self).__name__)
        self.clock = clock if clock is not None else datetime.datetime.now
        self.state = self.OPEN

        self.setUi()
        self._load_geometry()
        if init_value is not None:
            self.set_value(init_value)

    def set_callback(self, callback):
        self.callback = callback

    def setUi(self):  # NOQA
        'initialize widgets'
        self.setWindowTitle(self.caption)

        # title
        myfont = QtGui.QFont()
        myfont.setBold(True)
        myfont.setPointSize(20)
        title = QtWidgets.QLabel(self.caption, self)
        title.setAlignment(QtCore.Qt.AlignHCenter)
        title.setFont(myfont)

        # fields
        self.inputlayout = QtWidgets.QGridLayout()
        self.yearedit = QtWidgets.QLineEdit(self)
        self._add_field('Year', self.yearedit)
        self.monthbox = self._add_combo('Month', compose.MONTHS)
        self.daybox = self._add_combo('Day', compose.DAYS)

        # buttons
        self.nowbutton = QtWidgets.QPushButton(self.now_caption, self)
        self.nowbutton.clicked.connect(self.on_populate_from_now_requested)
        self.okbutton = QtWidgets.QPushButton('OK', self)
        self.okbutton.clicked.connect(self.on_confirm_requested)
        buttonlayout = QtWidgets.QHBoxLayout()
        buttonlayout.addWidget(self.nowbutton)
        buttonlayout.addWidget(self.okbutton)

        # layout
        mainlayout = QtWidgets.QVBoxLayout()
        mainlayout.setContentsMargins(10, 10, 10, 10)
        mainlayout.addWidget(title)
        mainlayout.addLayout(self.inputlayout)
        mainlayout.addLayout(buttonlayout)
        self.setLayout(mainlayout)

    def _add_field(self, label, widget):
        row = self.inputlayout.rowCount()
        self.inputlayout.addWidget(QtWidgets.QLabel(label, self), row, 0)
        self.inputlayout.addWidget(widget, row, 1)

    def _add_combo(self, label, bounds):
        '->QComboBox filled with integers within bounds'
        box = QtWidgets.QComboBox(self)
        box.addItems(bproc.range_items(*bounds))
        self._add_field(label, box)
        return box

    @staticmethod
    def _select(box, value):
        box.setCurrentIndex(box.findText(str(value)))

    def _load_geometry(self):
        geom = self.store.load()
        self.resize(geom.width, geom.height)
        self.move(geom.x, geom.y)

    def window_geometry(self):
        '->pickopt.WindowGeometry of the window as it is now'
        return pickopt.WindowGeometry(
            self.size().width(), self.size().height(), self.x(), self.y())

    def field_values(self):
        '->{field name: raw value}. year is a str, all others are int'
        return {
            'year': self.yearedit.text(),
            'month': int(self.monthbox.currentText()),
            'day': int(self.daybox.currentText()),
        }

    def compose_value(self):
        '->datetime.date. Raises compose.InvalidInputError'
        return compose.compose_date(**self.field_values())

    def set_value(self, value):
        'fill fields from date or datetime object'
        self.yearedit.setText(str(value.year))
        self._select(self.monthbox, value.month)
        self._select(self.daybox, value.day)

    def get_result(self):
        '->composed value or None if fields are invalid'
        try:
            return self.compose_value()
        except compose.InvalidInputError:
            return None

    def on_confirm_requested(self):
        if self.state != self.OPEN:
            return
        try:
            value = self.compose_value()
        except compose.InvalidInputError as e:
            log.info('%s rejected input: %s', type(self).__name__, e)
            self._show_error(self.error_text)
            return
        self.state = self.CONFIRMED
        if self.callback is not None:
            self.callback(value)
        self.confirmed.emit(value)
        self.close()

    def on_populate_from_now_requested(self):
        self.set_value(self.clock())

    def _show_error(self, text):
        QtWidgets.QMessageBox.warning(self, "Error", text)

    def closeEvent(self, event):  # NOQA
        'write window geometry to the store'
        self.store.save(self.window_geometry())
        if self.state == self.OPEN:
            self.state = self.CLOSED
        super(DatePicker, self).closeEvent(event)
        self.closed.emit()

import os

import pytest

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from PyQt5 import QtWidgets  # noqa: E402

from DatepickGui import pickopt  # noqa: E402


@pytest.fixture(scope='session')
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture
def options(tmp_path):
    opt = pickopt.PickOptions(str(tmp_path / 'opts' / 'datepickOpt.xml'))
    opt.read()
    return opt


@pytest.fixture
def errors(monkeypatch):
    'collects texts of message boxes instead of showing them'
    shown = []
    monkeypatch.setattr(QtWidgets.QMessageBox, 'warning',
                        lambda parent, title, text: shown.append(text))
    return shown

import os

from DatepickGui import pickopt


def test_load_on_empty_store_returns_defaults(options):
    store = pickopt.GeometryStore(options, 'DatePicker')

    assert store.load() == pickopt.WindowGeometry(300, 400, 100, 100)


def test_save_then_load_returns_geometry(options):
    store = pickopt.GeometryStore(options, 'DatePicker')
    geom = pickopt.WindowGeometry(640, 480, -20, 1500)

    store.save(geom)

    assert store.load() == geom


def test_saved_geometry_survives_reread(options):
    pickopt.GeometryStore(options, 'DateTimePicker').save(
        pickopt.WindowGeometry(350, 420, 10, 20))

    assert os.path.isfile(options.fn)
    reread = pickopt.PickOptions(options.fn)
    reread.read()
    store = pickopt.GeometryStore(reread, 'DateTimePicker')
    assert store.load() == pickopt.WindowGeometry(350, 420, 10, 20)


def test_namespaces_are_independent(options):
    date_store = pickopt.GeometryStore(options, 'DatePicker')
    time_store = pickopt.GeometryStore(options, 'DateTimePicker')

    date_store.save(pickopt.WindowGeometry(1, 2, 3, 4))

    assert time_store.load() == pickopt.DEFAULT_GEOMETRY
    assert date_store.load() == pickopt.WindowGeometry(1, 2, 3, 4)


def test_corrupted_file_gives_defaults(tmp_path):
    fn = tmp_path / 'datepickOpt.xml'
    fn.write_text('<DatepickOptions><WINDOW id="DatePicker">')
    opt = pickopt.PickOptions(str(fn))

    opt.read()

    assert opt.geometry('DatePicker') == pickopt.DEFAULT_GEOMETRY


def test_invalid_entries_fall_back_per_field(tmp_path):
    fn = tmp_path / 'datepickOpt.xml'
    fn.write_text(
        '<DatepickOptions><WINDOW id="DatePicker">'
        '<HX>500</HX><HY>tall</HY><X0>7</X0>'
        '</WINDOW><WINDOW><HX>1</HX></WINDOW></DatepickOptions>')
    opt = pickopt.PickOptions(str(fn))

    opt.read()

    assert opt.geometry('DatePicker') == pickopt.WindowGeometry(
        500, 400, 7, 100)
    assert list(opt.windows) == ['DatePicker']


def test_default_store_uses_working_directory(monkeypatch, tmp_path):
    monkeypatch.setattr(pickopt.PickOptions, 'wdir', str(tmp_path))

    store = pickopt.default_store('DatePicker')
    store.save(pickopt.WindowGeometry(301, 401, 101, 101))

    assert store.options.fn == os.path.join(str(tmp_path), 'datepickOpt.xml')
    assert pickopt.default_store('DatePicker').load() == \
        pickopt.WindowGeometry(301, 401, 101, 101)


def test_save_to_unwritable_path_is_logged(tmp_path, caplog):
    blocker = tmp_path / 'blocker'
    blocker.write_text('')
    opt = pickopt.PickOptions(str(blocker / 'sub' / 'datepickOpt.xml'))
    store = pickopt.GeometryStore(opt, 'DatePicker')

    store.save(pickopt.WindowGeometry(501, 502, 503, 504))

    assert 'Error writing options file' in caplog.text
    assert store.load() == pickopt.WindowGeometry(501, 502, 503, 504)


def test_unreadable_file_gives_defaults(options, monkeypatch, caplog):
    pickopt.GeometryStore(options, 'DatePicker').save(
        pickopt.WindowGeometry(1, 2, 3, 4))

    def denied(fn):
        raise PermissionError(13, 'Permission denied', fn)
    monkeypatch.setattr(pickopt.ET, 'parse', denied)
    opt = pickopt.PickOptions(options.fn)
    opt.read()

    assert opt.geometry('DatePicker') == pickopt.DEFAULT_GEOMETRY
    assert 'Error loading options file' in caplog.text


def test_stores_sharing_a_file_keep_each_other_entries(monkeypatch,
                                                       tmp_path):
    monkeypatch.setattr(pickopt.PickOptions, 'wdir', str(tmp_path))
    date_store = pickopt.default_store('DatePicker')
    time_store = pickopt.default_store('DateTimePicker')

    date_store.save(pickopt.WindowGeometry(501, 502, 503, 504))
    time_store.save(pickopt.WindowGeometry(601, 602, 603, 604))

    assert pickopt.default_store('DatePicker').load() == \
        pickopt.WindowGeometry(501, 502, 503, 504)
    assert pickopt.default_store('DateTimePicker').load() == \
        pickopt.WindowGeometry(601, 602, 603, 604)

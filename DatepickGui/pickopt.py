import collections
import logging
import os
import os.path
import xml.etree.ElementTree as ET
from . import bproc, config

log = logging.getLogger(__name__)

WindowGeometry = collections.namedtuple('WindowGeometry', 'width height x y')

DEFAULT_GEOMETRY = WindowGeometry(300, 400, 100, 100)

# xml tag -> WindowGeometry field
_geom_tags = (('HX', 'width'), ('HY', 'height'), ('X0', 'x'), ('Y0', 'y'))


class PickOptions(object):
    # These options could be changed before read() procedure
    opt_fn = 'datepickOpt.xml'
    wdir = config.working_directory
    ver = config.version

    def __init__(self, fn=None):
        """ fn - options file. Defaults to opt_fn within wdir.
            call read() to fill object from file
        """
        self.fn = fn if fn is not None else os.path.join(self.wdir,
                                                         self.opt_fn)
        # namespace -> {WindowGeometry field -> int}
        self.windows = {}

    def geometry(self, namespace):
        '->WindowGeometry. Stored values completed with defaults'
        stored = self.windows.get(namespace, {})
        return DEFAULT_GEOMETRY._replace(**stored)

    def set_geometry(self, namespace, geom):
        self.windows[namespace] = dict(geom._asdict())

    def write(self):
        '->bool. writes options to self.fn'
        root = ET.Element('DatepickOptions')
        root.attrib['version'] = self.ver
        for namespace in sorted(self.windows):
            w = ET.SubElement(root, 'WINDOW')
            w.attrib['id'] = namespace
            vals = self.windows[namespace]
            for tag, field in _geom_tags:
                if field in vals:
                    ET.SubElement(w, tag).text = str(vals[field])

        bproc.xmlindent(root)
        try:
            d = os.path.dirname(os.path.abspath(self.fn))
            if not os.path.isdir(d):
                os.makedirs(d)
            tree = ET.ElementTree(root)
            tree.write(self.fn, xml_declaration=True, encoding='utf-8')
        except OSError as e:
            log.warning('Error writing options file %s: %s', self.fn, e)
            return False
        return True

    def read(self):
        'tries to read data from self.fn. Keeps defaults on failure'
        if not os.path.isfile(self.fn):
            log.info('No options file at %s, using defaults', self.fn)
            return
        try:
            root = ET.parse(self.fn).getroot()
        except (ET.ParseError, OSError) as e:
            log.warning('Error loading options file %s: %s', self.fn, e)
            return

        for w in root.findall('WINDOW'):
            if 'id' not in w.attrib:
                continue
            vals = {}
            for tag, field in _geom_tags:
                node = w.find(tag)
                if node is None:
                    continue
                try:
                    vals[field] = int(node.text)
                except (TypeError, ValueError):
                    log.warning('Invalid %s value for window %s: %r',
                                tag, w.attrib['id'], node.text)
            self.windows[w.attrib['id']] = vals


class GeometryStore(object):
    'Window geometry persistence for a single picker namespace'
    def __init__(self, options, namespace):
        ' options - PickOptions object, namespace - str'
        self.options = options
        self.namespace = namespace

    def load(self):
        '->WindowGeometry. Stored values or DEFAULT_GEOMETRY'
        return self.options.geometry(self.namespace)

    def save(self, geom):
        """ Stores geom and writes options file.
            File is reread first to keep entries written by other pickers
        """
        self.options.read()
        self.options.set_geometry(self.namespace, WindowGeometry(*geom))
        if self.options.write():
            log.debug('Saved %s geometry to %s', self.namespace,
                      self.options.fn)


def default_store(namespace):
    '->GeometryStore over the options file in the working directory'
    opt = PickOptions()
    opt.read()
    return GeometryStore(opt, namespace)

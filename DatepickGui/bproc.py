import logging


def range_items(start, end):
    """ -> [str]. Dropdown entries for integers in [start, end]
        range_items(1, 3) -> ['1', '2', '3']
    """
    return [str(i) for i in range(start, end + 1)]


def configure_logging(level=logging.INFO):
    'root logger setup for the entry point'
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
        datefmt='%H:%M:%S')


#xml indent
def xmlindent(elem, level=0):
    """ http://effbot.org/zone/element-lib.htm#prettyprint.
        Walks the tree and adds spaces and newlines so that
        the written file is readable
    """
    tabsym = "  "
    i = "\n" + level * tabsym
    if len(elem):
        if not elem.text or not elem.text.strip():
            elem.text = i + tabsym
        if not elem.tail or not elem.tail.strip():
            elem.tail = i
        for child in elem:
            xmlindent(child, level + 1)
        if not child.tail or not child.tail.strip():
            child.tail = i
    else:
        if level and (not elem.tail or not elem.tail.strip()):
            elem.tail = i

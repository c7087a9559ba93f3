import sys
import os
import os.path
import re
import shutil


# ---- Converting program options
if len(sys.argv) == 1 or sys.argv[1] in ['-h', '-help', 'help', 'usage']:
    t = 'Setup usage:\n'
    t += '\tinstall - installs program to default directories\n'
    t += '\tclear - clears current directory '
    t += 'from temporary assembling files\n'
    print(t)
    sys.exit()


# clear current directory
if sys.argv[1] == 'clear':
    ddir = ['dist', 'build', 'Datepick.egg-info']
    for d in ddir:
        if os.path.exists(d):
            print('Removing %s' % os.path.abspath(d))
            if os.path.isfile(d):
                os.remove(d)
            else:
                shutil.rmtree(d)
    sys.exit()


# ---- Preprocessing
# read progname and version without importing the package
config = {}
with open(os.path.join(os.path.dirname(os.path.abspath(__file__)),
                       'DatepickGui', 'config.py')) as f:
    for m in re.finditer(r"^(progname|version) = '([^']*)'", f.read(),
                         re.M):
        config[m.group(1)] = m.group(2)
# ----


# ----- Setup Process
from setuptools import setup
setup(
    name='Datepick',
    version=config['version'],
    packages=['DatepickGui'],
    entry_points={
        'console_scripts': ['%s = DatepickGui.datepick:main' %
                            config['progname']]},
    install_requires=['PyQt5'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',

    description="Date and date/time picker windows",
)
# ---------

import os
from setuptools import setup, find_packages
from setuptools.command.build_py import build_py as _build

CLASSIFIERS = [
    'Operating System :: POSIX',
    'Operating System :: MacOS :: MacOS X',
    'Intended Audience :: Developers',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Content Management System'
]

pkgroot = os.path.dirname(os.path.abspath(__file__))
pydir = 'python'

def get_version():
    out = "dev"
    versfile = os.path.join(pkgroot, 'VERSION')
    if os.path.exists(versfile):
        with open(versfile) as fd:
            parts = fd.readline().split()
        if len(parts) > 0:
            out = parts[-1]
    else:
        out = "(unknown)"
    return out

def write_version_mod(version):
    versmodf = os.path.join(pkgroot, pydir, "themeview", "version.py")
    with open(versmodf, 'w') as fd:
        fd.write('"""')
        fd.write("""
An identification of the package version.  Note that this module file gets
(over-) written by the build process.
""")
        fd.write('"""\n\n')
        fd.write('__version__ = "')
        fd.write(version)
        fd.write('"\n')

class build(_build):

    def run(self):
        write_version_mod(get_version())
        _build.run(self)

setup(name='themeview',
      version=get_version(),
      description="themeview: locate theme-overridable view files for CMS plugins",
      package_dir={'': pydir},
      packages=find_packages(where=pydir, exclude=['tests', 'tests.*']),
      install_requires=['PyYAML'],
      extras_require={'test': ['pytest']},
      python_requires='>=3.7',
      cmdclass={'build_py': build},
      classifiers=CLASSIFIERS,
      zip_safe=False
)

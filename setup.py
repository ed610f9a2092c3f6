#!/usr/bin/env python
from setuptools import setup

def find_version(path):
    import re
    # path shall be a plain ascii text file.
    s = open(path, 'rt').read()
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              s, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Version not found")

setup(name="revad", version=find_version("revad/version.py"),
      description="Reverse-mode automatic differentiation of scalar expressions on a tape",
      zip_safe=True, # this should be pure python
      packages=[
                "revad", "revad.tests",
                "revad.core", "revad.core.stdlib", "revad.core.tests",
                "revad.lib", "revad.lib.tests",
        ],
      license='GPLv3',
      python_requires='>=3.8',
      install_requires=['numpy',
                        'scipy', # needed by revad.lib.optimize
                       ],
      extras_require={'test': ['pytest']},
      )

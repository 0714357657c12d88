#!/usr/bin/env python
"""
Build the two-leaf canopy model

that's all folks.
"""
__author__ = "Martin De Kauwe"
__version__ = "1.0 (13.08.2011)"
__email__ = "mdekauwe@gmail.com"

import os
import re
import subprocess
from setuptools import setup, Command
from setuptools.command.sdist import sdist as _sdist


def info(x):
    gitArg = ["git"]
    gitArg.extend(x)
    git_info = subprocess.check_output(gitArg, universal_newlines=True)
    return(git_info.split('\n'))

VERSION_PY = """
# This file is originally generated from Git information by running 'setup.py
# version'

__version__ = '%s'
"""

def update_version_py():
    if not os.path.isdir(".git"):
        print("This does not appear to be a Git repository.")
        return
    try:
        ver = info(["rev-parse", "HEAD"])[0]
    except (EnvironmentError, subprocess.CalledProcessError):
        print("unable to run git, leaving src/_version.py alone")
        return
    with open("src/_version.py", "w") as f:
        f.write(VERSION_PY % ver)
    print("set src/_version.py to '%s'" % ver)

def get_version():
    try:
        f = open("src/_version.py")
    except EnvironmentError:
        return None
    with f:
        for line in f.readlines():
            mo = re.match("__version__ = '([^']+)'", line)
            if mo:
                return mo.group(1)
    return None

class Version(Command):
    description = "update _version.py from Git repo"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        update_version_py()
        print("Version is now", get_version())

class sdist(_sdist):
    def run(self):
        update_version_py()
        # unless we update this, the sdist command will keep using the old
        # version
        self.distribution.metadata.version = get_version()
        return _sdist.run(self)

setup(name="pytwoleaf",
    version=get_version(),
    description="Half-hourly two-leaf (sunlit/shaded) canopy model of the G'DAY family",
    long_description="Couples leaf energy balance, stomatal conductance and photosynthesis for a sunlit and a shaded big leaf and accumulates daily C & water fluxes",
    author="Martin De Kauwe",
    author_email='mdekauwe@gmail.com',
    platforms = ['any'],
    package_dir = {'twoleaf': 'src'},
    packages = ['twoleaf'],
    python_requires=">=3.7",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["twoleaf = twoleaf.model:main"]},
    cmdclass={"version": Version, "sdist": sdist},
)

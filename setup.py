#!/usr/bin/env python
# vim: set et sw=4 sts=4:

# Copyright 2012 Dave Hughes.
#
# This file is part of sqltidy.
#
# sqltidy is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# sqltidy is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with
# sqltidy.  If not, see <http://www.gnu.org/licenses/>.

import os
import re
import io
from setuptools import setup, find_packages

HERE = os.path.abspath(os.path.dirname(__file__))

REQUIRES = []

EXTRA_REQUIRES = {
    'test': ['pytest'],
    }

CLASSIFIERS = [
    'Development Status :: 5 - Production/Stable',
    'Environment :: Console',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3',
    'Programming Language :: SQL',
    'Topic :: Database',
    'Topic :: Text Processing',
    ]

ENTRY_POINTS = {
    'console_scripts': [
        'sqltidy = sqltidy.main.tidysql:main',
        'sqlcolumnize = sqltidy.main.columnize:main',
        ]
    }


def description(filename):
    """Returns the content of filename for use as the long description"""
    with io.open(filename, encoding='utf-8') as f:
        return f.read()

def get_version(filename):
    """Extracts __version__ from filename without importing it"""
    with io.open(filename, encoding='utf-8') as f:
        for line in f:
            match = re.match(r"^__version__\s*=\s*['\"]([^'\"]*)['\"]", line)
            if match:
                return match.group(1)
    raise RuntimeError('Unable to find __version__ in %s' % filename)

def main():
    setup(
        name                 = 'sqltidy',
        version              = get_version(os.path.join(HERE, 'sqltidy/__init__.py')),
        description          = 'Reformats SQL queries into a consistently indented layout',
        long_description     = description(os.path.join(HERE, 'README.rst')),
        classifiers          = CLASSIFIERS,
        author               = 'Dave Hughes',
        author_email         = 'dave@waveform.org.uk',
        keywords             = 'sql format pretty-print',
        packages             = find_packages(exclude=['tests']),
        include_package_data = True,
        platforms            = 'ALL',
        python_requires      = '>=3.6',
        install_requires     = REQUIRES,
        extras_require       = EXTRA_REQUIRES,
        zip_safe             = False,
        entry_points         = ENTRY_POINTS,
        )

if __name__ == '__main__':
    main()

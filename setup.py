#!/usr/bin/env python3

from __future__ import annotations

import re
import sys

if sys.version_info < (3, 10):
    sys.exit('emojitable needs Python 3.10+')

from pathlib import Path

from setuptools import find_packages
from setuptools import setup

REPO_DIR = Path(__file__).resolve().parent
DATA_FILES = [
    'data/emoji-test.txt',
    'data/gemoji.json',
]


def get_version() -> str:
    init_file = REPO_DIR / 'emojitable' / '__init__.py'
    match = re.search(r"^__version__ = '([^']+)'",
                      init_file.read_text(encoding='utf8'),
                      re.MULTILINE)
    if match is None:
        raise ValueError('Unable to find __version__ in %s' % init_file)
    return match.group(1)


setup(
    name='emojitable',
    version=get_version(),
    description='Unicode emoji lookup by sequence and shortcode',
    long_description=(REPO_DIR / 'README.md').read_text(encoding='utf8'),
    long_description_content_type='text/markdown',
    license='GPL-3.0-only',
    python_requires='>=3.10',
    packages=find_packages(include=['emojitable', 'emojitable.*']),
    package_data={
        'emojitable': DATA_FILES,
    },
    install_requires=[
        'rapidfuzz>=2.0',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'emojitable = emojitable.cli:main',
        ],
    },
)

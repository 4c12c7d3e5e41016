#!/usr/bin/env python3
from __future__ import annotations

import re
import setuptools
import pathlib

__minver__ = '3.8'
__author__ = 'mspdb contributors'
__slogan__ = 'A byte-exact implementation of the legacy PasswordDeriveBytes key derivation.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Security',
    'Topic :: Security :: Cryptography',
]

here = pathlib.Path(__file__).parent.absolute()


def get_version() -> str:
    with open(here / 'mspdb' / '__init__.py', 'r', encoding='UTF8') as init:
        match = re.search(R'''^__version__\s*=\s*['"]([^'"]+)['"]''', init.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError('unable to determine the package version')
    return match[1]


def get_setup_readme(filename: str | pathlib.Path | None = None):
    if filename is None:
        filename = here / 'README.md'
    with open(filename, 'r', encoding='UTF8') as README:
        return README.read()


def get_config():
    return dict(
        name='mspdb',
        version=get_version(),
        description=__slogan__,
        long_description=get_setup_readme(),
        long_description_content_type='text/markdown',
        author=__author__,
        python_requires=F'>={__minver__}',
        classifiers=__topics__,
        packages=setuptools.find_packages(include=('mspdb*',)),
        install_requires=['pycryptodomex'],
        extras_require={'test': ['flake8']},
    )


if __name__ == '__main__':
    setuptools.setup(**get_config())

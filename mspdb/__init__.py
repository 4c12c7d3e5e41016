#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A byte-exact reimplementation of the legacy PasswordDeriveBytes key derivation. The engine is
`mspdb.derive.PasswordDeriveBytes`; the exceptions it raises live in `mspdb.lib.exceptions` and
the supported hash algorithms are listed in `mspdb.lib.hashing.HASH`.

Configuration is read from the following environment variables:

1. `MSPDB_VERBOSITY`: log level of the mspdb loggers, either a name like `DEBUG` or a verbosity
   number where 0 means warnings, 1 means info and 2 means debug output.
2. `MSPDB_STRICT_ASCII`: reject text passwords with characters outside of 7-bit ASCII instead of
   replacing these characters with a question mark.
"""
from __future__ import annotations

__version__ = '0.1.0'
__distribution__ = 'mspdb'

from mspdb.derive import PasswordDeriveBytes, Phase, password_derive_bytes
from mspdb.lib.exceptions import (
    ConfigurationError,
    DerivationOverflowError,
    MSPDBException,
    RangeError,
    StateError,
)
from mspdb.lib.hashing import HASH

__all__ = [
    'ConfigurationError',
    'DerivationOverflowError',
    'HASH',
    'MSPDBException',
    'PasswordDeriveBytes',
    'Phase',
    'RangeError',
    'StateError',
    'password_derive_bytes',
]

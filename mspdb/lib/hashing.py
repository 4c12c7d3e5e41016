#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Selection of digest functions by name. The legacy platforms identify hash algorithms by strings
like `SHA1`, `SHA-1` or `System.Security.Cryptography.SHA1Managed`; this module maps all of these
spellings to one of the hash modules of pycryptodomex.
"""
from __future__ import annotations

import importlib
import re

from enum import Enum
from typing import TYPE_CHECKING

from mspdb.lib.exceptions import ConfigurationError

if TYPE_CHECKING:
    from typing import Protocol
    from mspdb.lib.types import buf

    class _Hash(Protocol):
        digest_size: int
        def update(self, data: buf): ...
        def digest(self) -> bytes: ...
        def hexdigest(self) -> str: ...

    class _HashModule(Protocol):
        digest_size: int
        def new(self, data=None) -> _Hash: ...


__all__ = ['HASH']

_NAMESPACE = 'SYSTEM.SECURITY.CRYPTOGRAPHY.'
_SUFFIXES = ('CRYPTOSERVICEPROVIDER', 'MANAGED', 'CNG')


class HASH(str, Enum):
    MD2 = 'MD2'
    MD4 = 'MD4'
    MD5 = 'MD5'
    SHA1 = 'SHA1'
    SHA224 = 'SHA224'
    SHA256 = 'SHA256'
    SHA384 = 'SHA384'
    SHA512 = 'SHA512'
    RIPEMD160 = 'RIPEMD160'
    SHA3_224 = 'SHA3_224'
    SHA3_256 = 'SHA3_256'
    SHA3_384 = 'SHA3_384'
    SHA3_512 = 'SHA3_512'

    @classmethod
    def FromName(cls, name: str) -> HASH:
        """
        Resolve an algorithm name as it would be passed to the legacy API. Raises a
        `mspdb.lib.exceptions.ConfigurationError` if the name does not identify a known digest.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ConfigurationError(F'hash algorithm name must be a string, got {type(name).__name__}')
        key = name.strip().upper()
        if key.startswith(_NAMESPACE):
            key = key[len(_NAMESPACE):]
        key = re.sub(R'[\s_-]', '', key)
        for suffix in _SUFFIXES:
            if key.endswith(suffix) and len(key) > len(suffix):
                key = key[:-len(suffix)]
                break
        try:
            return _ALIASES[key]
        except KeyError:
            raise ConfigurationError(F'unknown hash algorithm: {name!r}') from None

    @property
    def module(self) -> _HashModule:
        return importlib.import_module(F'Cryptodome.Hash.{self.value}')


_ALIASES = {member.name.replace('_', ''): member for member in HASH}
_ALIASES.update(
    SHA=HASH.SHA1,
    RIPEMD=HASH.RIPEMD160,
    RMD160=HASH.RIPEMD160,
)

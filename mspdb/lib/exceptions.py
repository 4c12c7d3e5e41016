#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised by `mspdb.derive.PasswordDeriveBytes`. Every exception derives from
`mspdb.lib.exceptions.MSPDBException` and also from the builtin exception type that best
describes the failure, so callers can catch either.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    'MSPDBException',
    'ConfigurationError',
    'StateError',
    'RangeError',
    'DerivationOverflowError',
]


class MSPDBException(Exception):
    """
    Base class of all exceptions raised by mspdb.
    """


class ConfigurationError(MSPDBException, ValueError):
    """
    The engine was given a missing password, a digest name that does not resolve, or an invalid
    iteration count.
    """


class StateError(MSPDBException, RuntimeError):
    """
    A configuration property was changed after the first bytes were requested.
    """
    def __init__(self, name: str):
        super().__init__(F'cannot change the {name} after derivation has started')
        self.name = name


class RangeError(MSPDBException, IndexError):
    """
    A nonpositive number of bytes was requested, or the request is too short to hold the bytes
    that the legacy derivation copies into the second chunk.
    """
    def __init__(self, count: int, message: Optional[str] = None):
        if message is None:
            message = F'requested {count} bytes; at least one byte must be requested'
        super().__init__(message)
        self.count = count


class DerivationOverflowError(MSPDBException, OverflowError):
    """
    The request would extend the hash chain past the last block the legacy derivation can produce.
    """
    def __init__(self, limit: int):
        super().__init__(F'too long; the hash chain is limited to {limit} blocks')
        self.limit = limit

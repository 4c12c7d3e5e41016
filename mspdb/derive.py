#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
An implementation of the PasswordDeriveBytes routine available from the .NET standard library.
According to documentation, it is an extension of PBKDF1: The password and salt are hashed, the
result is hashed repeatedly according to the iteration count, and the resulting seed is expanded
into a chain of blocks of the form

    H(seed), H("1" + seed), H("2" + seed), ..., H("999" + seed)

where the block index is prepended as a decimal string. The legacy API was commonly used to
derive a key and an IV with two subsequent calls; the second of these calls does not simply
continue the stream but splices in bytes from the boundary between the two requests. This quirk
is reproduced so that the output matches the legacy implementation byte for byte:

    >>> pdb = PasswordDeriveBytes('password', salt)
    >>> key = pdb.get_bytes(16)
    >>> iv = pdb.get_bytes(16)

Instances are not internally synchronized; each instance requires exclusive access by one
thread at a time. Separate instances are fully independent.
"""
from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Optional, Union

from mspdb.lib.environment import environment, logger
from mspdb.lib.exceptions import (
    ConfigurationError,
    DerivationOverflowError,
    RangeError,
    StateError,
)
from mspdb.lib.hashing import HASH
from mspdb.lib.types import buf, isbuffer

if TYPE_CHECKING:
    from mspdb.lib.hashing import _HashModule

__all__ = ['Phase', 'PasswordDeriveBytes', 'password_derive_bytes']

_log = logger(__name__)

MAX_BLOCKS = 1000
"""
The hash chain ends before the block with this index.
"""


class Phase(IntEnum):
    """
    Tracks how many requests a `mspdb.derive.PasswordDeriveBytes` has served since the last reset.
    """
    UNINITIALIZED = 0
    FIRST_CHUNK_EMITTED = 1
    SECOND_CHUNK_EMITTED = 2


def encode_password(password: str) -> bytes:
    """
    Encode a text password as 7-bit ASCII. Characters outside of ASCII are replaced by a question
    mark unless the `MSPDB_STRICT_ASCII` environment variable is set, in which case they raise a
    `mspdb.lib.exceptions.ConfigurationError`.
    """
    if environment.strict_ascii.value:
        try:
            return password.encode('ascii')
        except UnicodeEncodeError as E:
            raise ConfigurationError(
                F'password contains a non-ASCII character at position {E.start}') from None
    return password.encode('ascii', errors='replace')


class PasswordDeriveBytes:
    """
    Derive an arbitrary amount of key material from a password. The salt, the hash algorithm and
    the iteration count can be changed until the first call to `get_bytes`; after that, they are
    locked until the next call to `reset`.
    """
    _password: bytes
    _salt: Optional[bytes]
    _hash_name: str
    _hash: HASH
    _hash_module: _HashModule
    _iterations: int
    _phase: Phase
    _initial: Optional[bytes]
    _seed: Optional[bytes]
    _position: int
    _counter: int
    _skip: int
    _first: Optional[bytes]

    def __init__(
        self,
        password: Union[str, buf],
        salt: Optional[buf] = None,
        hash: str = 'SHA-1',
        iterations: int = 100,
    ):
        if password is None:
            raise ConfigurationError('a password is required')
        if isinstance(password, str):
            password = encode_password(password)
        elif not isbuffer(password):
            raise ConfigurationError(F'password must be text or a buffer, got {type(password).__name__}')
        self._password = bytes(password)
        self._phase = Phase.UNINITIALIZED
        self._initial = None
        self._seed = None
        self._position = 0
        self._counter = 0
        self._skip = 0
        self._first = None
        self.salt = salt
        self.hash_name = hash
        self.iteration_count = iterations

    def _check_mutable(self, name: str):
        if self._phase is not Phase.UNINITIALIZED:
            raise StateError(name)

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def salt(self) -> Optional[bytes]:
        return self._salt

    @salt.setter
    def salt(self, value: Optional[buf]):
        self._check_mutable('salt')
        if value is not None:
            if not isbuffer(value):
                raise ConfigurationError(F'salt must be a buffer, got {type(value).__name__}')
            value = bytes(value)
        self._salt = value

    @property
    def hash_name(self) -> str:
        return self._hash_name

    @hash_name.setter
    def hash_name(self, value: str):
        self._check_mutable('hash algorithm')
        if value is None:
            raise ConfigurationError('a hash algorithm name is required')
        algorithm = HASH.FromName(value)
        self._hash_module = algorithm.module
        self._hash = algorithm
        self._hash_name = value

    @property
    def hash(self) -> HASH:
        return self._hash

    @property
    def digest_size(self) -> int:
        """
        The size of a single block of the hash chain.
        """
        return self._hash_module.digest_size

    @property
    def iteration_count(self) -> int:
        return self._iterations

    @iteration_count.setter
    def iteration_count(self, value: int):
        self._check_mutable('iteration count')
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(F'iteration count must be an integer, got {type(value).__name__}')
        if value < 1:
            raise ConfigurationError(F'iteration count must be greater than 0, got {value}')
        self._iterations = value

    def _digest(self, data: buf) -> bytes:
        return self._hash_module.new(data).digest()

    def reset(self):
        """
        Restart the output stream from the beginning and unlock the configuration.
        """
        self._phase = Phase.UNINITIALIZED
        self._position = 0
        self._counter = 0
        self._skip = 0
        self._seed = None
        self._first = None
        if self._salt is not None:
            self._initial = self._digest(self._password + self._salt)
        else:
            self._initial = self._digest(self._password)
        _log.debug(F'reset; computed initial {self._hash.name} block')

    def _compute_seed(self) -> bytes:
        seed = self._initial
        # the initial hash counts as the first iteration
        rounds = max(1, self._iterations - 1) - 1
        for _ in range(rounds):
            seed = self._digest(seed)
        _log.debug(F'computed seed with {rounds} additional rounds')
        return seed

    def _expand(self, seed: bytes, count: int):
        position = self._position
        counter = self._counter
        output = bytearray()
        while len(output) < count:
            if counter == 0:
                block = self._digest(seed)
            elif counter < MAX_BLOCKS:
                block = self._digest(B'%d%s' % (counter, seed))
            else:
                raise DerivationOverflowError(MAX_BLOCKS)
            size = min(count - len(output), len(block) - position)
            output.extend(block[position:position + size])
            position += size
            while position >= len(block):
                position -= len(block)
                counter += 1
        return output, position, counter

    def get_bytes(self, count: int) -> bytes:
        """
        Return the next `count` bytes of the derived stream. The first two calls after a reset are
        subject to the splicing behavior of the legacy implementation.
        """
        if count < 1:
            raise RangeError(count)
        if self._phase is Phase.UNINITIALIZED:
            # the configuration stays locked even if this request fails
            self.reset()
            self._phase = Phase.FIRST_CHUNK_EMITTED
        if self._seed is None:
            self._seed = self._compute_seed()

        output, position, counter = self._expand(self._seed, count)

        if self._first is None:
            self._skip = (40 if count > 20 else 20) - count
            self._first = bytes(output)
        elif self._phase is Phase.FIRST_CHUNK_EMITTED:
            skip = self._skip
            if skip > 0:
                combined = self._first + output
                if count < skip or len(combined) < 2 * skip:
                    raise RangeError(count, (
                        F'requested {count} bytes, but the second request after a first request of '
                        F'{len(self._first)} bytes must receive {skip} spliced bytes; request at least '
                        F'{max(skip, 2 * skip - len(self._first))} bytes'))
                output[:skip] = combined[skip:2 * skip]
                _log.debug(F'spliced {skip} bytes into the second chunk')
            self._skip = 0
            self._phase = Phase.SECOND_CHUNK_EMITTED

        self._position = position
        self._counter = counter
        return bytes(output)

    def __repr__(self):
        return (
            F'{self.__class__.__name__}(hash={self._hash_name!r}, '
            F'iterations={self._iterations}, phase={self._phase.name})')


def password_derive_bytes(
    password: Union[str, buf],
    salt: Optional[buf],
    size: int,
    hash: str = 'SHA-1',
    iterations: int = 100,
) -> bytes:
    """
    Return the first `size` bytes derived from the given password and salt. This is the output
    of a single call to `mspdb.derive.PasswordDeriveBytes.get_bytes` on a fresh instance.
    """
    return PasswordDeriveBytes(password, salt, hash, iterations).get_bytes(size)

"""
Type aliases for the buffer types accepted throughout mspdb.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import Union
    buf = Union[bytes, bytearray, memoryview]
else:
    buf = Any

__all__ = ['buf', 'isbuffer']


def isbuffer(obj) -> bool:
    """
    Test whether `obj` is an object that supports the buffer API, like a bytes or bytearray object.
    """
    try:
        with memoryview(obj):
            return True
    except TypeError:
        return False

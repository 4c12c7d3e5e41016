import hashlib
import logging
import random
import unittest

import mspdb


__all__ = ['mspdb', 'TestBase', 'reference_stream']


def reference_stream(password: bytes, salt, iterations: int, size: int, algorithm: str = 'sha1') -> bytes:
    """
    Compute the first `size` bytes of the derived stream from a single request, using only the
    standard library. Serves as an independent model of the hash chain.
    """
    def h(data):
        return hashlib.new(algorithm, data).digest()
    seed = h(password + (salt or B''))
    for _ in range(max(1, iterations - 1) - 1):
        seed = h(seed)
    stream = h(seed)
    counter = 1
    while len(stream) < size:
        stream += h(str(counter).encode('ascii') + seed)
        counter += 1
    return stream[:size]


class TestBase(unittest.TestCase):

    def generate_random_buffer(self, size):
        return bytes(random.randrange(0, 0x100) for _ in range(size))

    def setUp(self):
        random.seed(0xBAADF00D)  # guarantee deterministic 'random' buffers
        logging.disable(logging.CRITICAL)

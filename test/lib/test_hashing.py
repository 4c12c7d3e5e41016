#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import hashlib

from mspdb.lib.exceptions import ConfigurationError, MSPDBException
from mspdb.lib.hashing import HASH

from .. import TestBase


class TestHashNames(TestBase):

    def test_sha1_spellings(self):
        for name in (
            'SHA1',
            'sha1',
            'SHA-1',
            'sha_1',
            'SHA',
            ' SHA1 ',
            'SHA1Managed',
            'SHA1CryptoServiceProvider',
            'System.Security.Cryptography.SHA1',
            'System.Security.Cryptography.SHA1Managed',
        ):
            self.assertIs(HASH.FromName(name), HASH.SHA1, msg=name)

    def test_other_spellings(self):
        self.assertIs(HASH.FromName('MD5'), HASH.MD5)
        self.assertIs(HASH.FromName('md5cryptoserviceprovider'), HASH.MD5)
        self.assertIs(HASH.FromName('SHA-256'), HASH.SHA256)
        self.assertIs(HASH.FromName('SHA256Cng'), HASH.SHA256)
        self.assertIs(HASH.FromName('sha-512'), HASH.SHA512)
        self.assertIs(HASH.FromName('SHA3-256'), HASH.SHA3_256)
        self.assertIs(HASH.FromName('RIPEMD160Managed'), HASH.RIPEMD160)
        self.assertIs(HASH.FromName('RIPEMD'), HASH.RIPEMD160)
        self.assertIs(HASH.FromName(HASH.MD4), HASH.MD4)

    def test_unknown_names(self):
        for name in ('', 'Managed', 'SHA-0', 'TIGER', 'System.Security.Cryptography.'):
            with self.assertRaises(ConfigurationError, msg=name):
                HASH.FromName(name)

    def test_invalid_type(self):
        with self.assertRaises(MSPDBException):
            HASH.FromName(1)

    def test_digest_sizes(self):
        self.assertEqual(HASH.MD2.module.digest_size, 16)
        self.assertEqual(HASH.MD4.module.digest_size, 16)
        self.assertEqual(HASH.MD5.module.digest_size, 16)
        self.assertEqual(HASH.SHA1.module.digest_size, 20)
        self.assertEqual(HASH.RIPEMD160.module.digest_size, 20)
        self.assertEqual(HASH.SHA224.module.digest_size, 28)
        self.assertEqual(HASH.SHA256.module.digest_size, 32)
        self.assertEqual(HASH.SHA384.module.digest_size, 48)
        self.assertEqual(HASH.SHA512.module.digest_size, 64)
        self.assertEqual(HASH.SHA3_512.module.digest_size, 64)

    def test_digests_match_hashlib(self):
        data = self.generate_random_buffer(100)
        for algorithm, name in (
            (HASH.MD5, 'md5'),
            (HASH.SHA1, 'sha1'),
            (HASH.SHA256, 'sha256'),
            (HASH.SHA384, 'sha384'),
            (HASH.SHA3_256, 'sha3_256'),
        ):
            self.assertEqual(algorithm.module.new(data).digest(), hashlib.new(name, data).digest())

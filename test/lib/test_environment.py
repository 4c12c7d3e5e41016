#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import logging
import os

from unittest import mock

from mspdb.lib.environment import EVBool, EVLog, LogLevel, MSPDBFormatter, logger

from .. import TestBase


class TestEnvironment(TestBase):

    def test_boolean_settings(self):
        for value, expected in (
            ('1', True),
            ('yes', True),
            ('On', True),
            ('0', False),
            ('no', False),
            ('OFF', False),
            ('false', False),
            ('', False),
        ):
            with mock.patch.dict(os.environ, {'MSPDB_STRICT_ASCII': value}):
                self.assertEqual(EVBool('STRICT_ASCII').value, expected, msg=value)

    def test_boolean_setting_missing(self):
        with mock.patch.dict(os.environ, clear=True):
            setting = EVBool('STRICT_ASCII')
        self.assertEqual(setting.key, 'MSPDB_STRICT_ASCII')
        self.assertFalse(setting.value)

    def test_verbosity_settings(self):
        for value, expected in (
            ('0', LogLevel.WARNING),
            ('1', LogLevel.INFO),
            ('2', LogLevel.DEBUG),
            ('7', LogLevel.DEBUG),
            ('DEBUG', LogLevel.DEBUG),
            ('info', LogLevel.INFO),
            ('DETACHED', LogLevel.DETACHED),
            ('LOUD', None),
        ):
            with mock.patch.dict(os.environ, {'MSPDB_VERBOSITY': value}):
                self.assertEqual(EVLog('VERBOSITY').value, expected, msg=value)

    def test_verbosity_from_negative_number(self):
        self.assertIs(LogLevel.FromVerbosity(-1), LogLevel.DETACHED)

    def test_logger_configuration(self):
        log = logger('mspdb.test')
        self.assertFalse(log.propagate)
        self.assertEqual(len(log.handlers), 1)
        self.assertIsInstance(log.handlers[0].formatter, MSPDBFormatter)
        self.assertIs(logger('mspdb.test'), log)
        self.assertEqual(len(log.handlers), 1)

    def test_formatter_level_names(self):
        formatter = MSPDBFormatter('{custom_level_name}: {message}', style='{')
        for level, name in (
            (logging.DEBUG, 'verbose'),
            (logging.INFO, 'comment'),
            (logging.WARNING, 'warning'),
            (logging.ERROR, 'failure'),
        ):
            record = logging.LogRecord('mspdb', level, __file__, 1, 'hello', None, None)
            self.assertEqual(formatter.format(record), F'{name}: hello')

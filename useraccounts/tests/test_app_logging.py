"""Tests for :mod:`useraccounts.app_logging`."""

import io
import json
import logging
from unittest import TestCase

from .. import app_logging


class TestSetupLogger(TestCase):
    """Tests for :func:`.app_logging.setup_logger`."""

    def setUp(self):
        """Remember the root logger as it was."""
        self.root = logging.getLogger()
        self.handlers = list(self.root.handlers)
        self.level = self.root.level

    def tearDown(self):
        """Put the root logger back."""
        self.root.handlers = self.handlers
        self.root.setLevel(self.level)

    def installed(self):
        return [h for h in self.root.handlers
                if getattr(h, '_useraccounts', False)]

    def test_installs_once(self):
        """Calling it twice does not duplicate output."""
        self.root.handlers = []
        app_logging.setup_logger('10')
        app_logging.setup_logger(logging.INFO)
        self.assertEqual(len(self.installed()), 1)
        self.assertEqual(self.root.level, logging.INFO)

    def test_json_records(self):
        """Records are written as JSON objects."""
        self.root.handlers = []
        app_logging.setup_logger('DEBUG')
        stream = io.StringIO()
        self.installed()[0].setStream(stream)
        logging.getLogger('useraccounts.test').info('Created user %s', 'u1')
        record = json.loads(stream.getvalue().strip())
        self.assertEqual(record['message'], 'Created user u1')
        self.assertEqual(record['level'], 'INFO')
        self.assertEqual(record['name'], 'useraccounts.test')
        self.assertIn('timestamp', record)

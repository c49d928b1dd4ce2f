"""Tests for :mod:`useraccounts.cli`."""

import os
import shutil
import tempfile
from unittest import TestCase

from click.testing import CliRunner

from ..cli import cli


class TestCLI(TestCase):
    """Run the commands against a throwaway database file."""

    def setUp(self):
        """Point the application at a new database."""
        self.workdir = tempfile.mkdtemp()
        path = os.path.join(self.workdir, 'cli.db')
        self.env = {
            'SQLALCHEMY_DATABASE_URI': f'sqlite:///{path}',
            'CREATE_DB': '0',
            'BOOTSTRAP_ADMIN': '0',
            'ADMIN_USERNAME': 'root',
            'ADMIN_PASSWORD': 'rootpassword',
            'ADMIN_EMAIL': 'root@example.com'
        }
        self.runner = CliRunner()

    def tearDown(self):
        """Remove the database."""
        shutil.rmtree(self.workdir)

    def create_user(self, *extra: str):
        return self.runner.invoke(cli, [
            'create-user', '--username', 'jane', '--email',
            'jane@example.com', '--password', 'secret', '--name', 'Jane Doe',
            *extra
        ], env=self.env)

    def test_create_user(self):
        """A user is created."""
        result = self.create_user()
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Created user jane', result.output)

    def test_create_admin(self):
        """The admin flag is accepted."""
        result = self.create_user('--admin')
        self.assertEqual(result.exit_code, 0, result.output)

    def test_create_duplicate(self):
        """The same username cannot be used twice."""
        self.create_user()
        result = self.create_user()
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn('Username already exists', result.output)

    def test_bootstrap_admin(self):
        """The admin is created once."""
        result = self.runner.invoke(cli, ['bootstrap-admin'], env=self.env)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Created admin user root', result.output)

        result = self.runner.invoke(cli, ['bootstrap-admin'], env=self.env)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('already exists', result.output)

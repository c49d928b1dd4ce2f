"""Tests for :mod:`useraccounts.services.passwords`."""

from unittest import TestCase, mock

from .. import passwords
from ..exceptions import PasswordHashingFailed


class TestPasswords(TestCase):
    """Hashing and checking passwords."""

    def test_hash_and_check(self):
        """A digest matches the password it came from, and nothing else."""
        digest = passwords.hash_password('correct horse')
        self.assertNotEqual(digest, 'correct horse')
        self.assertTrue(passwords.check_password('correct horse', digest))
        self.assertFalse(passwords.check_password('wrong horse', digest))

    def test_salted(self):
        """The same password hashes differently each time."""
        self.assertNotEqual(passwords.hash_password('foo'),
                            passwords.hash_password('foo'))

    def test_malformed_digest(self):
        """A digest that bcrypt cannot read never matches."""
        self.assertFalse(passwords.check_password('foo', 'notadigest'))

    @mock.patch(f'{passwords.__name__}.bcrypt.hashpw')
    def test_hashing_fails(self, mock_hashpw):
        """Any failure in the primitive is reported as such."""
        mock_hashpw.side_effect = RuntimeError('entropy exhausted')
        with self.assertRaises(PasswordHashingFailed):
            passwords.hash_password('foo')

    def test_is_hashable(self):
        """Passwords are limited by their encoded length."""
        self.assertTrue(passwords.is_hashable('a' * 72))
        self.assertFalse(passwords.is_hashable('a' * 73))
        self.assertFalse(passwords.is_hashable('é' * 37))

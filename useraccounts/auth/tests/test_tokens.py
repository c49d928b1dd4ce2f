"""Tests for :mod:`useraccounts.auth.tokens`."""

from unittest import TestCase

from ... import domain
from .. import tokens


class TestGenerate(TestCase):
    """Tests for :func:`.tokens.generate`."""

    def setUp(self):
        """A user who already exists."""
        self.user = domain.User(user_id='u1', name='Jane Doe',
                                username='jane', password='digest',
                                email='jane@example.com')

    def test_generate(self):
        """A token is bound to the user, with a fresh random value."""
        first = tokens.generate(self.user)
        second = tokens.generate(self.user)
        self.assertEqual(first.user_id, 'u1')
        self.assertNotEqual(first.value, second.value)
        self.assertNotEqual(first.token_id, second.token_id)

    def test_entropy(self):
        """More random bytes make a longer value."""
        short = tokens.generate(self.user, nbytes=tokens.MIN_TOKEN_BYTES)
        long = tokens.generate(self.user, nbytes=tokens.MAX_TOKEN_BYTES)
        self.assertLess(len(short.value), len(long.value))

    def test_user_without_id(self):
        """Only stored users can get a token."""
        with self.assertRaises(ValueError):
            tokens.generate(self.user._replace(user_id=None))

    def test_largest_token_fits_storage(self):
        """Even the largest token fits in the token column."""
        for _ in range(20):
            token = tokens.generate(self.user, nbytes=tokens.MAX_TOKEN_BYTES)
            self.assertLessEqual(len(token.value), tokens.MAX_TOKEN_LENGTH)

    def test_size_out_of_range(self):
        """Token sizes are bounded on both sides."""
        for nbytes in [0, tokens.MIN_TOKEN_BYTES - 1,
                       tokens.MAX_TOKEN_BYTES + 1, 200]:
            with self.assertRaises(ValueError):
                tokens.generate(self.user, nbytes=nbytes)

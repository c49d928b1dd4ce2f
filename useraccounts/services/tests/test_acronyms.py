"""Tests for :mod:`useraccounts.services.acronyms`."""

from unittest import TestCase

from ... import domain
from .. import acronyms, users
from .util import temporary_db, register


class TestAcronyms(TestCase):
    """Tests for :func:`.acronyms.get_acronyms`."""

    def test_no_acronyms(self):
        """A user with no acronyms gets an empty list."""
        with temporary_db():
            user = register()
            self.assertEqual(acronyms.get_acronyms(user.user_id), [])

    def test_in_insertion_order(self):
        """Acronyms come back in the order they were added."""
        with temporary_db():
            user = register()
            first = acronyms.add_acronym(domain.Acronym(
                short='AFK', long='Away from keyboard', user_id=user.user_id
            ))
            second = acronyms.add_acronym(domain.Acronym(
                short='BRB', long='Be right back', user_id=user.user_id
            ))
            self.assertIsNotNone(first.acronym_id)
            self.assertEqual(acronyms.get_acronyms(user.user_id),
                             [first, second])

    def test_owner_soft_deleted(self):
        """Acronyms outlive a soft delete of their owner."""
        with temporary_db():
            user = register()
            acronyms.add_acronym(domain.Acronym(
                short='IMO', long='In my opinion', user_id=user.user_id
            ))
            users.soft_delete(user.user_id)
            self.assertEqual(len(acronyms.get_acronyms(user.user_id)), 1)

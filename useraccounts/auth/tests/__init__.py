"""Tests for :mod:`useraccounts.auth`."""

"""Tests for :mod:`useraccounts.routes`."""

"""Tests for :mod:`useraccounts.controllers`."""

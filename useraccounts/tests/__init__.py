"""Package-level tests."""

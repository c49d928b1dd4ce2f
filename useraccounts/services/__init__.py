"""Storage and business logic for user accounts."""

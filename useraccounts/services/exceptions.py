"""Exceptions raised by the account services."""


class NoSuchUser(RuntimeError):
    """User does not exist (in the scope that was queried)."""


class NoSuchToken(RuntimeError):
    """Bearer token does not exist."""


class AuthenticationFailed(RuntimeError):
    """Failed to authenticate user with provided credentials."""


class NotAuthorized(RuntimeError):
    """Authenticated user is not permitted to perform this action."""


class ConstraintViolation(RuntimeError):
    """Storage rejected a write that violates one of its constraints."""


class DuplicateUsername(ConstraintViolation):
    """Another user already holds this username."""


class DuplicateEmail(ConstraintViolation):
    """Another user already holds this e-mail address."""


class PasswordHashingFailed(RuntimeError):
    """The password hashing subsystem failed. Not recoverable."""

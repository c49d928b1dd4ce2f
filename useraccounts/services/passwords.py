"""Password hashing and verification."""

import logging

import bcrypt

from .exceptions import PasswordHashingFailed

logger = logging.getLogger(__name__)

MAX_PASSWORD_BYTES = 72
"""bcrypt ignores (or refuses) anything beyond this many bytes."""


def hash_password(password: str) -> str:
    """
    Generate a salted bcrypt digest of a password.

    Raises
    ------
    :class:`.PasswordHashingFailed`
        If the hashing primitive fails for any reason. Callers must abort
        rather than fall back to storing the plaintext.

    """
    try:
        hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt())
    except Exception as e:
        logger.error('Password hashing failed: %s', type(e).__name__)
        raise PasswordHashingFailed('Could not hash password') from e
    return hashed.decode('ascii')


def check_password(password: str, digest: str) -> bool:
    """Check a password against a stored digest, in constant time."""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), digest.encode('ascii'))
    except ValueError as e:    # Malformed or non-bcrypt digest.
        logger.warning('Could not check password against digest: %s', e)
        return False


def is_hashable(password: str) -> bool:
    """Whether bcrypt can take the whole password into account."""
    return len(password.encode('utf-8')) <= MAX_PASSWORD_BYTES

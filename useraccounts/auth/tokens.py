"""Issues bearer tokens for authenticated users."""

import secrets
import uuid

from .. import domain

DEFAULT_TOKEN_BYTES = 16
MIN_TOKEN_BYTES = 16
MAX_TOKEN_BYTES = 64

MAX_TOKEN_LENGTH = 128
"""Column width for token values. URL-safe base64 needs 4 characters for
every 3 bytes, so :const:`MAX_TOKEN_BYTES` fits with room to spare."""


def generate(user: domain.User,
             nbytes: int = DEFAULT_TOKEN_BYTES) -> domain.Token:
    """
    Generate a new bearer token for ``user``.

    The token is not stored; persisting it is up to the caller.

    Parameters
    ----------
    user : :class:`.domain.User`
        Must already exist (i.e. have a ``user_id``).
    nbytes : int
        Number of random bytes behind the token value, between
        :const:`MIN_TOKEN_BYTES` and :const:`MAX_TOKEN_BYTES`.

    Returns
    -------
    :class:`.domain.Token`

    """
    if user.user_id is None:
        raise ValueError('Cannot issue a token for a user without an id')
    if not MIN_TOKEN_BYTES <= nbytes <= MAX_TOKEN_BYTES:
        raise ValueError(f'Token size must be between {MIN_TOKEN_BYTES} and '
                         f'{MAX_TOKEN_BYTES} bytes, not {nbytes}')
    return domain.Token(token_id=str(uuid.uuid4()), user_id=user.user_id,
                        value=secrets.token_urlsafe(nbytes))

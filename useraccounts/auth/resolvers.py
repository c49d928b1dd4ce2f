"""
Principal resolvers.

Each resolver looks at one kind of credential on a request and works out which
user (if any) the request is acting as. They all share the signature
``(request) -> Optional[domain.User]``:

- ``None`` means the request does not carry this kind of credential at all;
- a :class:`.domain.User` means the credential is good;
- :class:`werkzeug.exceptions.Unauthorized` is raised when the credential is
  present but bad.
"""

from typing import Callable, Optional
import logging

from flask import Request
from werkzeug.datastructures import WWWAuthenticate
from werkzeug.exceptions import Unauthorized

from .. import domain
from ..services import accounts, tokens
from ..services.exceptions import AuthenticationFailed, NoSuchToken, \
    NoSuchUser

logger = logging.getLogger(__name__)

Resolver = Callable[[Request], Optional[domain.User]]

BASIC_CHALLENGE = WWWAuthenticate('basic', {'realm': 'users'})
BEARER_CHALLENGE = WWWAuthenticate('bearer', {'realm': 'users'})


def basic(request: Request) -> Optional[domain.User]:
    """Resolve the principal from HTTP Basic username/password credentials."""
    credentials = request.authorization
    if credentials is None or credentials.type != 'basic':
        return None
    try:
        return accounts.authenticate(credentials.username or '',
                                     credentials.password or '')
    except AuthenticationFailed as e:
        logger.debug('Basic authentication failed: %s', e)
        raise Unauthorized('Invalid username or password',
                           www_authenticate=BASIC_CHALLENGE) from e


def bearer(request: Request) -> Optional[domain.User]:
    """Resolve the principal from an ``Authorization: Bearer`` token."""
    header = request.headers.get('Authorization')
    if not header:
        return None
    scheme, _, value = header.partition(' ')
    if scheme.lower() != 'bearer':
        return None
    value = value.strip()
    if not value:
        raise Unauthorized('Missing bearer token',
                           www_authenticate=BEARER_CHALLENGE)
    try:
        return tokens.get_user_for_token(value)
    except (NoSuchToken, NoSuchUser) as e:
        logger.debug('Token authentication failed: %s', e)
        raise Unauthorized('Invalid authorization token',
                           www_authenticate=BEARER_CHALLENGE) from e

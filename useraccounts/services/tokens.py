"""Storage for bearer tokens issued at login."""

from typing import List
import logging

from .. import domain
from . import util
from .exceptions import NoSuchToken, NoSuchUser
from .models import DBToken, DBUser
from .users import _to_domain

logger = logging.getLogger(__name__)


def store(token: domain.Token) -> domain.Token:
    """Persist a newly issued token."""
    with util.transaction() as session:
        session.add(DBToken(token_id=token.token_id, value=token.value,
                            user_id=token.user_id))
    logger.debug('Stored token %s for user %s', token.token_id, token.user_id)
    return token


def get_user_for_token(value: str) -> domain.User:
    """
    Resolve a bearer token to the user who owns it.

    Raises
    ------
    :class:`.NoSuchToken`
        No token has this value.
    :class:`.NoSuchUser`
        The token exists, but its owner is not an active user.

    """
    with util.transaction() as session:
        db_token = session.query(DBToken) \
            .filter(DBToken.value == value) \
            .first()
        if db_token is None:
            raise NoSuchToken('No such token')
        db_user = session.query(DBUser) \
            .filter(DBUser.user_id == db_token.user_id) \
            .filter(DBUser.deleted_at.is_(None)) \
            .first()
        if db_user is None:
            raise NoSuchUser('No active user with passed token exists')
        return _to_domain(db_user)


def get_tokens_for_user(user_id: str) -> List[domain.Token]:
    """Get all of the tokens issued to a user."""
    with util.transaction() as session:
        return [
            domain.Token(token_id=db_token.token_id, value=db_token.value,
                         user_id=db_token.user_id)
            for db_token in session.query(DBToken)
            .filter(DBToken.user_id == user_id)
            .all()
        ]

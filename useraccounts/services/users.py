"""
Persistence and queries for user accounts.

Soft-deleted users stay in the ``users`` table with ``deleted_at`` set, and
keep their username and e-mail address reserved. Every query here goes
through :func:`_users`, which makes the caller say whether soft-deleted rows
should be visible.
"""

from typing import List
import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query
from sqlalchemy.orm.session import Session

from .. import domain
from . import util
from .exceptions import NoSuchUser, ConstraintViolation, DuplicateUsername, \
    DuplicateEmail
from .models import DBUser, DBToken, DBAcronym

logger = logging.getLogger(__name__)

USERNAME_CONSTRAINTS = ('uq_users_username', 'users.username', '(username)')
"""How drivers name the username constraint: by name (PostgreSQL, MySQL), by
column (SQLite) or in the key detail (PostgreSQL)."""

EMAIL_CONSTRAINTS = ('uq_users_email', 'users.email', '(email)')


def get_user_by_id(user_id: str) -> domain.User:
    """
    Load an active user.

    Parameters
    ----------
    user_id : str

    Returns
    -------
    :class:`.domain.User`

    Raises
    ------
    :class:`.NoSuchUser`
        If there is no active user with this id.

    """
    with util.transaction() as session:
        db_user = _users(session, include_deleted=False) \
            .filter(DBUser.user_id == user_id) \
            .first()
        if db_user is None:
            raise NoSuchUser('User does not exist')
        return _to_domain(db_user)


def get_user_by_id_including_deleted(user_id: str) -> domain.User:
    """Load a user whether or not they have been soft-deleted."""
    with util.transaction() as session:
        db_user = _users(session, include_deleted=True) \
            .filter(DBUser.user_id == user_id) \
            .first()
        if db_user is None:
            raise NoSuchUser('User does not exist')
        return _to_domain(db_user)


def get_user_by_username(username: str) -> domain.User:
    """Load an active user by their (case-sensitive) username."""
    with util.transaction() as session:
        db_user = _users(session, include_deleted=False) \
            .filter(DBUser.username == username) \
            .first()
        if db_user is None:
            raise NoSuchUser('User does not exist')
        return _to_domain(db_user)


def list_active() -> List[domain.User]:
    """Get all active users."""
    with util.transaction() as session:
        return [_to_domain(db_user) for db_user
                in _users(session, include_deleted=False).all()]


def count_by_username(username: str) -> int:
    """
    Count users holding a username.

    Soft-deleted users are counted, since they still hold their username.
    """
    with util.transaction() as session:
        count: int = _users(session, include_deleted=True) \
            .filter(DBUser.username == username) \
            .count()
        return count


def save(user: domain.User) -> domain.User:
    """
    Insert or update a user.

    A user without a ``user_id`` is inserted with a freshly generated one.

    Raises
    ------
    :class:`.DuplicateUsername`
    :class:`.DuplicateEmail`
        Storage rejected the write because the username or e-mail address is
        held by another user (including soft-deleted users).
    :class:`.ConstraintViolation`
        Storage rejected the write for some other reason.

    """
    try:
        with util.transaction() as session:
            db_user = None
            if user.user_id is not None:
                db_user = session.get(DBUser, user.user_id)
            if db_user is None:
                db_user = DBUser(user_id=user.user_id or str(uuid.uuid4()))
                session.add(db_user)
            db_user.name = user.name
            db_user.username = user.username
            db_user.password = user.password
            db_user.email = user.email
            db_user.profile_picture = user.profile_picture
            db_user.role = user.role.value
            db_user.deleted_at = user.deleted_at
            session.commit()
            return _to_domain(db_user)
    except IntegrityError as e:
        raise _classify(e) from e


def soft_delete(user_id: str) -> domain.User:
    """
    Flag an active user as deleted, without removing the record.

    Raises
    ------
    :class:`.NoSuchUser`
        If there is no active user with this id.

    """
    with util.transaction() as session:
        db_user = _users(session, include_deleted=False) \
            .filter(DBUser.user_id == user_id) \
            .first()
        if db_user is None:
            raise NoSuchUser('User does not exist')
        db_user.deleted_at = util.now()
        session.commit()
        logger.info('Soft-deleted user %s', user_id)
        return _to_domain(db_user)


def restore(user_id: str) -> domain.User:
    """
    Clear the deletion flag on a user.

    Restoring a user who is already active changes nothing.

    Raises
    ------
    :class:`.NoSuchUser`
        If there is no user with this id at all.

    """
    with util.transaction() as session:
        db_user = _users(session, include_deleted=True) \
            .filter(DBUser.user_id == user_id) \
            .first()
        if db_user is None:
            raise NoSuchUser('User does not exist')
        if db_user.deleted_at is not None:
            db_user.deleted_at = None
            session.commit()
            logger.info('Restored user %s', user_id)
        return _to_domain(db_user)


def hard_delete(user_id: str) -> domain.User:
    """
    Permanently remove a user, along with their tokens and acronyms.

    This cannot be undone. It is the only operation that frees the user's
    username and e-mail address.

    Returns
    -------
    :class:`.domain.User`
        The last known state of the user, tagged as purged.

    Raises
    ------
    :class:`.NoSuchUser`
        If there is no user with this id at all.

    """
    with util.transaction() as session:
        db_user = _users(session, include_deleted=True) \
            .filter(DBUser.user_id == user_id) \
            .first()
        if db_user is None:
            raise NoSuchUser('User does not exist')
        purged = _to_domain(db_user)._replace(state=domain.UserState.PURGED)
        session.query(DBToken).filter(DBToken.user_id == user_id) \
            .delete(synchronize_session=False)
        session.query(DBAcronym).filter(DBAcronym.user_id == user_id) \
            .delete(synchronize_session=False)
        session.delete(db_user)
        session.commit()
    logger.info('Purged user %s', user_id)
    return purged


def _users(session: Session, *, include_deleted: bool) -> Query:
    query = session.query(DBUser)
    if not include_deleted:
        query = query.filter(DBUser.deleted_at.is_(None))
    return query


def _to_domain(db_user: DBUser) -> domain.User:
    if db_user.deleted_at is None:
        state = domain.UserState.ACTIVE
    else:
        state = domain.UserState.SOFT_DELETED
    return domain.User(
        user_id=db_user.user_id,
        name=db_user.name,
        username=db_user.username,
        password=db_user.password,
        email=db_user.email,
        profile_picture=db_user.profile_picture,
        role=domain.Role(db_user.role),
        deleted_at=db_user.deleted_at,
        state=state
    )


def _classify(e: IntegrityError) -> ConstraintViolation:
    """Work out which constraint an integrity error came from."""
    message = str(e.orig).lower()
    if any(name in message for name in USERNAME_CONSTRAINTS):
        return DuplicateUsername('Username already exists')
    if any(name in message for name in EMAIL_CONSTRAINTS):
        return DuplicateEmail('Email already exists')
    return ConstraintViolation(str(e.orig))

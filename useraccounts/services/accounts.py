"""
The account lifecycle: creation, login, deletion and restoration of users.

Creation and uniqueness
-----------------------
:func:`register` checks that the username is free before it hashes the
password and inserts the user. The check and the insert are separate round
trips, so two concurrent registrations for the same username can both pass
the check. When that happens the unique constraint in storage rejects the
second insert, and :func:`.users.save` raises the same
:class:`.DuplicateUsername` that the early check would have raised. Callers
should treat any :class:`.ConstraintViolation` the same way.

Deletion
--------
A soft delete (:func:`delete`) can be undone with :func:`restore`. A force
delete (:func:`force_delete`) cannot.
"""

from typing import List, Optional, Tuple
import logging

from flask import current_app

from .. import domain
from ..auth import tokens as issuer
from . import users, passwords, acronyms, tokens
from .exceptions import AuthenticationFailed, DuplicateUsername, \
    NoSuchUser, NotAuthorized

logger = logging.getLogger(__name__)


def register(name: str, username: str, password: str, email: str,
             profile_picture: Optional[str] = None,
             role: domain.Role = domain.Role.STANDARD) -> domain.User:
    """
    Create a new user.

    Parameters
    ----------
    name : str
    username : str
    password : str
        Plaintext. Only its digest is stored.
    email : str
    profile_picture : str or None
    role : :class:`.domain.Role`

    Returns
    -------
    :class:`.domain.User`

    Raises
    ------
    :class:`.DuplicateUsername`
        The username is taken, whether detected up front or by storage.
    :class:`.DuplicateEmail`
        The e-mail address is taken.
    :class:`.ConstraintViolation`
        Storage rejected the user for some other reason.
    :class:`.PasswordHashingFailed`
        The password could not be hashed; nothing was written.

    """
    if users.count_by_username(username) > 0:
        raise DuplicateUsername('Username already exists')
    user = users.save(domain.User(
        name=name,
        username=username,
        password=passwords.hash_password(password),
        email=email,
        profile_picture=profile_picture,
        role=role
    ))
    logger.info('Created user %s with role %s', user.user_id, role.value)
    return user


def authenticate(username: str, password: str) -> domain.User:
    """
    Validate username/password for an active user.

    Raises
    ------
    :class:`.AuthenticationFailed`
        Raised if there is no active user with that username, or if the
        password is incorrect. The two cases are not distinguished.

    """
    logger.debug('Authenticate with password, user: %s', username)
    try:
        user = users.get_user_by_username(username)
    except NoSuchUser as e:
        logger.debug('No such user: %s', username)
        raise AuthenticationFailed('Invalid username or password') from e
    if not passwords.check_password(password, user.password):
        logger.debug('Incorrect password for user: %s', username)
        raise AuthenticationFailed('Invalid username or password')
    return user


def login(principal: domain.User) -> domain.Token:
    """
    Issue and store a new bearer token for an authenticated user.

    The password is not checked again here; ``principal`` must come from the
    Basic-Auth stage.
    """
    nbytes = current_app.config.get('TOKEN_BYTES', issuer.DEFAULT_TOKEN_BYTES)
    token = tokens.store(issuer.generate(principal, nbytes))
    logger.info('Issued token %s to user %s', token.token_id,
                principal.user_id)
    return token


def delete(principal: domain.User, user_id: str) -> domain.User:
    """
    Soft-delete a user. Only administrators may do this.

    The role is checked before the target is looked up, so that callers who
    are not administrators learn nothing about which users exist.

    Raises
    ------
    :class:`.NotAuthorized`
        ``principal`` is not an administrator.
    :class:`.NoSuchUser`
        There is no active user with ``user_id``.

    """
    _require_admin(principal, 'delete users')
    return users.soft_delete(user_id)


def restore(principal: domain.User, user_id: str) -> domain.User:
    """
    Restore a soft-deleted user. Only administrators may do this.

    Restoring a user who was never deleted succeeds and changes nothing.

    Raises
    ------
    :class:`.NotAuthorized`
        ``principal`` is not an administrator.
    :class:`.NoSuchUser`
        There is no user with ``user_id``, deleted or otherwise.

    """
    _require_admin(principal, 'restore users')
    return users.restore(user_id)


def force_delete(principal: domain.User, user_id: str) -> domain.User:
    """
    Permanently remove a user, soft-deleted or not.

    Raises
    ------
    :class:`.NoSuchUser`
        There is no user with ``user_id``, deleted or otherwise.

    """
    user = users.get_user_by_id_including_deleted(user_id)
    logger.info('User %s is purging user %s', principal.user_id, user_id)
    return users.hard_delete(user.user_id)


def list_with_acronyms() -> List[Tuple[domain.User, List[domain.Acronym]]]:
    """Get every active user, each paired with the acronyms they own."""
    active = users.list_active()
    owned = [acronyms.get_acronyms(user.user_id) for user in active]
    return list(zip(active, owned))


def _require_admin(principal: domain.User, action: str) -> None:
    if not principal.is_admin:
        logger.debug('User %s may not %s', principal.user_id, action)
        raise NotAuthorized(f'Only administrators may {action}')

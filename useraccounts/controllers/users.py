"""
Controllers for the users API.

Each controller returns a ``(data, status code, headers)`` tuple for the route
to serialize, and turns failures from the account services into HTTP
exceptions.
"""

from typing import Any, Optional, Tuple
from http import HTTPStatus
import logging

from flask import url_for
from werkzeug.exceptions import BadRequest, Conflict, Forbidden, \
    InternalServerError, NotFound

from .. import domain
from ..services import accounts, acronyms, users
from ..services.exceptions import ConstraintViolation, DuplicateEmail, \
    DuplicateUsername, NoSuchUser, NotAuthorized, PasswordHashingFailed
from .forms import UserForm

logger = logging.getLogger(__name__)

ResponseData = Tuple[Any, int, dict]

NO_SUCH_USER = 'There is no such user'
USERNAME_TAKEN = 'Username already exists'
EMAIL_TAKEN = 'Email already exists'
ADMIN_ONLY = 'Only administrators may do this'


def list_users() -> ResponseData:
    """Get the public view of every active user."""
    data = [domain.public_view(user) for user in users.list_active()]
    return data, HTTPStatus.OK, {}


def list_users_with_acronyms() -> ResponseData:
    """Get every active user along with the acronyms they own."""
    data = [domain.user_with_acronyms_view(user, owned)
            for user, owned in accounts.list_with_acronyms()]
    return data, HTTPStatus.OK, {}


def get_user(user_id: str) -> ResponseData:
    """Get the public view of an active user."""
    try:
        user = users.get_user_by_id(user_id)
    except NoSuchUser as e:
        raise NotFound(NO_SUCH_USER) from e
    return domain.public_view(user), HTTPStatus.OK, {}


def get_user_acronyms(user_id: str) -> ResponseData:
    """
    Get the acronyms owned by a user.

    Acronyms stay visible while their owner is soft-deleted; only a user who
    does not exist at all gets a 404.
    """
    try:
        users.get_user_by_id_including_deleted(user_id)
    except NoSuchUser as e:
        raise NotFound(NO_SUCH_USER) from e
    data = [domain.acronym_view(acronym)
            for acronym in acronyms.get_acronyms(user_id)]
    return data, HTTPStatus.OK, {}


def login(principal: domain.User) -> ResponseData:
    """Issue a bearer token to a user who passed Basic authentication."""
    token = accounts.login(principal)
    return domain.token_view(token), HTTPStatus.OK, {}


def create_user(payload: Optional[Any]) -> ResponseData:
    """
    Create a new user.

    Parameters
    ----------
    payload : dict
        Should include ``name``, ``username``, ``password`` and ``email``,
        and may include ``profile_picture`` and ``role``.

    Returns
    -------
    dict
        Public view of the new user.
    int
        Status code. 201 if all goes well.
    dict
        Headers to add to the response, including ``Location``.

    """
    form = UserForm.from_json(payload)
    if not form.validate():
        logger.debug('User data is not valid: %s', form.error_messages)
        response = BadRequest('Invalid user data')
        response.data = {'errors': form.error_messages}   # type: ignore
        raise response

    try:
        user = accounts.register(
            name=form.name.data,
            username=form.username.data,
            password=form.password.data,
            email=form.email.data,
            profile_picture=form.profile_picture.data or None,
            role=form.role_value
        )
    except DuplicateUsername as e:
        raise Conflict(USERNAME_TAKEN) from e
    except DuplicateEmail as e:
        raise Conflict(EMAIL_TAKEN) from e
    except ConstraintViolation as e:
        raise Conflict('Could not create user') from e
    except PasswordHashingFailed as e:
        logger.error('Aborted user creation: %s', e)
        raise InternalServerError('Could not create user') from e

    location = url_for('api.get_user', user_id=user.user_id)
    return domain.public_view(user), HTTPStatus.CREATED, \
        {'Location': location}


def delete_user(principal: domain.User, user_id: str) -> ResponseData:
    """Soft-delete a user, on behalf of an administrator."""
    try:
        accounts.delete(principal, user_id)
    except NotAuthorized as e:
        raise Forbidden(ADMIN_ONLY) from e
    except NoSuchUser as e:
        raise NotFound(NO_SUCH_USER) from e
    return None, HTTPStatus.NO_CONTENT, {}


def restore_user(principal: domain.User, user_id: str) -> ResponseData:
    """Restore a soft-deleted user, on behalf of an administrator."""
    try:
        user = accounts.restore(principal, user_id)
    except NotAuthorized as e:
        raise Forbidden(ADMIN_ONLY) from e
    except NoSuchUser as e:
        raise NotFound(NO_SUCH_USER) from e
    return domain.public_view(user), HTTPStatus.OK, {}


def force_delete_user(principal: domain.User, user_id: str) -> ResponseData:
    """Permanently remove a user."""
    try:
        accounts.force_delete(principal, user_id)
    except NoSuchUser as e:
        raise NotFound(NO_SUCH_USER) from e
    return None, HTTPStatus.NO_CONTENT, {}

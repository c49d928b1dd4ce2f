"""Provides the JSON API for user accounts."""

from typing import Any, Tuple
from http import HTTPStatus
import logging

from flask import Blueprint, Response, request, jsonify, make_response
from werkzeug.exceptions import HTTPException

from ..auth import resolvers
from ..auth.decorators import authenticated, guard
from ..controllers import users as controllers
from ..services import util

logger = logging.getLogger(__name__)

blueprint = Blueprint('api', __name__, url_prefix='/users')
health = Blueprint('health', __name__, url_prefix='')


def _respond(data: Any, code: int, headers: dict) -> Response:
    if code == HTTPStatus.NO_CONTENT:
        response = make_response('', code)
    else:
        response = make_response(jsonify(data), code)
    response.headers.extend(headers)
    return response


@health.route('/status', methods=['GET'])
def service_status() -> Tuple[Response, int]:
    """Health check endpoint."""
    if util.is_available():
        return jsonify({'status': 'OK'}), HTTPStatus.OK
    return jsonify({'status': 'Unavailable'}), \
        HTTPStatus.SERVICE_UNAVAILABLE


@blueprint.route('', methods=['GET'])
def list_users() -> Response:
    """List the public view of all active users."""
    return _respond(*controllers.list_users())


@blueprint.route('/acronyms', methods=['GET'])
def list_users_with_acronyms() -> Response:
    """List all active users, each with the acronyms they own."""
    return _respond(*controllers.list_users_with_acronyms())


@blueprint.route('/<string:user_id>', methods=['GET'])
def get_user(user_id: str) -> Response:
    """Get the public view of a single active user."""
    return _respond(*controllers.get_user(user_id))


@blueprint.route('/<string:user_id>/acronyms', methods=['GET'])
def get_user_acronyms(user_id: str) -> Response:
    """Get the acronyms owned by a user."""
    return _respond(*controllers.get_user_acronyms(user_id))


@blueprint.route('/login', methods=['POST'])
@authenticated(resolvers.basic)
@guard
def login() -> Response:
    """Exchange Basic credentials for a bearer token."""
    return _respond(*controllers.login(request.auth))


@blueprint.route('', methods=['POST'])
@authenticated(resolvers.bearer)
@guard
def create_user() -> Response:
    """Create a new user."""
    payload = request.get_json(silent=True)
    return _respond(*controllers.create_user(payload))


@blueprint.route('/<string:user_id>', methods=['DELETE'])
@authenticated(resolvers.bearer)
@guard
def delete_user(user_id: str) -> Response:
    """Soft-delete a user."""
    return _respond(*controllers.delete_user(request.auth, user_id))


@blueprint.route('/<string:user_id>/restore', methods=['POST'])
@authenticated(resolvers.bearer)
@guard
def restore_user(user_id: str) -> Response:
    """Restore a soft-deleted user."""
    return _respond(*controllers.restore_user(request.auth, user_id))


@blueprint.route('/<string:user_id>/force', methods=['DELETE'])
@authenticated(resolvers.bearer)
@guard
def force_delete_user(user_id: str) -> Response:
    """Permanently remove a user."""
    return _respond(*controllers.force_delete_user(request.auth, user_id))


@blueprint.app_errorhandler(HTTPException)
def handle_http_exception(error: HTTPException) -> Response:
    """Render HTTP errors as JSON, keeping their headers."""
    data = {'reason': error.description}
    extra = getattr(error, 'data', None)
    if isinstance(extra, dict):
        data.update(extra)
    response = make_response(jsonify(data), error.code or 500)
    for key, value in error.get_headers():
        if key.lower() != 'content-type':
            response.headers[key] = value
    return response

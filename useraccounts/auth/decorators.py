"""
Decorators that make up the authentication pipeline of a route.

A route lists its stages explicitly, outermost first:

.. code-block:: python

   @blueprint.route('/<string:user_id>', methods=['DELETE'])
   @authenticated(resolvers.bearer)
   @guard
   def delete_user(user_id: str):
       ...

When the decorated route function is called...

- :func:`authenticated` runs its resolver, and attaches the resolved
  principal (or ``None``) to the Flask request as ``request.auth``. A resolver
  that finds bad credentials raises :class:`Unauthorized` itself.
- :func:`guard` raises :class:`Unauthorized` if no principal was attached, so
  a route can never run unauthenticated because a stage was skipped.
- Finally, the route is called with the original parameters.

Role checks (e.g. "only administrators may delete users") are the business of
the account lifecycle in :mod:`useraccounts.services.accounts`, not of this
pipeline.
"""

from typing import Any, Callable
from functools import wraps
import logging

from flask import request
from werkzeug.exceptions import Unauthorized

from .resolvers import Resolver

logger = logging.getLogger(__name__)


def authenticated(resolver: Resolver) -> Callable:
    """
    Generate a decorator that resolves the principal of a request.

    Parameters
    ----------
    resolver : function
        One of the resolvers in :mod:`.resolvers`, or anything else with the
        signature ``(request) -> Optional[domain.User]``.

    Returns
    -------
    function

    """
    def stage(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            request.auth = resolver(request)
            return func(*args, **kwargs)
        return wrapper
    return stage


def guard(func: Callable) -> Callable:
    """Refuse the request unless a principal has been attached to it."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if getattr(request, 'auth', None) is None:
            logger.debug('No authenticated principal; aborting')
            raise Unauthorized('Authentication required')
        return func(*args, **kwargs)
    return wrapper

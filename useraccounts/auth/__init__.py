"""
Authentication and authorization of requests.

Routes pick how a request is authenticated by stacking decorators from
:mod:`.decorators`, giving each one a principal resolver from
:mod:`.resolvers`:

.. code-block:: python

   from useraccounts.auth import decorators, resolvers

   @blueprint.route('/login', methods=['POST'])
   @decorators.authenticated(resolvers.basic)
   @decorators.guard
   def login():
       principal = request.auth
       ...

The resolved user (the principal) is available as ``flask.request.auth`` for
the rest of the request. Install :class:`Auth` on the application so that
``request.auth`` is always defined, even on routes with no authentication.
"""

from typing import Optional

from flask import Flask, request


class Auth(object):
    """Attaches an (initially empty) principal to each request."""

    def __init__(self, app: Optional[Flask] = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Register :meth:`.clear_principal` to run before each request."""
        self.app = app
        self.app.before_request(self.clear_principal)

    def clear_principal(self) -> None:
        """No principal until an auth stage resolves one."""
        request.auth = None

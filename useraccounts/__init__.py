"""
User accounts service.

This package provides a small Flask application that manages user accounts:
creating them, authenticating them, and taking them through a reversible
deletion lifecycle. It also exposes each user's acronyms, which are owned by
the user but otherwise opaque to this service.

Authentication happens in two tiers. A user logs in once with HTTP Basic
credentials (username and password) and receives a bearer token. Every
mutating request after that presents the token, and the authenticated user is
attached to the Flask request as ``flask.request.auth``.

Deleting a user is normally a *soft* delete: the record is flagged with a
``deleted_at`` timestamp, disappears from the usual queries, and can be
restored by an administrator. A separate *force* delete removes the record
permanently, which is the only way to free its username and email address for
reuse.

Quick start
-----------

.. code-block:: python

   from useraccounts.factory import create_web_app

   app = create_web_app({'CREATE_DB': True, 'BOOTSTRAP_ADMIN': True,
                         'ADMIN_PASSWORD': 'changeme'})
   app.run()

Then log in as the bootstrap administrator::

   $ curl -X POST -u admin:changeme http://localhost:5000/users/login

"""

from .domain import User, UserPublic, UserState, Role, Token, Acronym

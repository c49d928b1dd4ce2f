"""Flask configuration."""
import secrets
import os

VERSION = '0.1'
"""The application version."""

SECRET_KEY = os.environ.get('SECRET_KEY', secrets.token_urlsafe(16))
"""Sets the `Flask` secret key. Not directly used by the accounts API."""

LOGLEVEL = os.environ.get('LOGLEVEL', 20)
"""Root log level. May be numeric or a level name, e.g. ``DEBUG``."""


#################### Storage ####################

SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI',
                                         'sqlite:///useraccounts.db')
"""Any SQLAlchemy database URL.

Relative SQLite paths are resolved against the Flask instance folder."""

SQLALCHEMY_TRACK_MODIFICATIONS = False

CREATE_DB = bool(int(os.environ.get('CREATE_DB', '0')))
"""Create all tables when the application starts."""


#################### Auth ####################

TOKEN_BYTES = int(os.environ.get('TOKEN_BYTES', '16'))
"""Number of random bytes behind each issued bearer token, from 16 to 64."""


#################### Admin bootstrap ####################

BOOTSTRAP_ADMIN = bool(int(os.environ.get('BOOTSTRAP_ADMIN', '0')))
"""Make sure an administrator account exists when the application starts."""

ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
ADMIN_NAME = os.environ.get('ADMIN_NAME', 'Admin')
ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@localhost.local')
ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', secrets.token_urlsafe(16))
"""If not set, nobody will know the bootstrap admin's password.

Set this explicitly when enabling ``BOOTSTRAP_ADMIN``."""

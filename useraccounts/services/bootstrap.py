"""Makes sure the service has an administrator to start with."""

from typing import Optional
import logging

from .. import domain
from . import accounts, users
from .exceptions import DuplicateUsername, DuplicateEmail

logger = logging.getLogger(__name__)


def bootstrap_admin(username: str, password: str, email: str,
                    name: str = 'Admin') -> Optional[domain.User]:
    """
    Create the administrator account, unless it already exists.

    Safe to run on every startup, including from several workers at once.

    Returns
    -------
    :class:`.domain.User` or None
        The new administrator, or ``None`` if there was nothing to do.

    """
    if users.count_by_username(username) > 0:
        logger.debug('Admin user %s already exists', username)
        return None
    try:
        admin = accounts.register(name=name, username=username,
                                  password=password, email=email,
                                  role=domain.Role.ADMIN)
    except (DuplicateUsername, DuplicateEmail):
        logger.debug('Admin user %s was created concurrently', username)
        return None
    logger.info('Created admin user %s', admin.user_id)
    return admin

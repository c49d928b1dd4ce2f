"""Defines user account concepts used throughout the service."""

from typing import Optional, NamedTuple, List
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    """Authorization role held by a :class:`.User`."""

    STANDARD = 'standard'
    ADMIN = 'admin'


class UserState(str, Enum):
    """
    Where a :class:`.User` sits in the deletion lifecycle.

    ``ACTIVE`` and ``SOFT_DELETED`` can move back and forth (soft delete and
    restore). ``PURGED`` is terminal: the record no longer exists in storage,
    and only the value returned by a force delete ever carries it.
    """

    ACTIVE = 'active'
    SOFT_DELETED = 'soft_deleted'
    PURGED = 'purged'


class UserPublic(NamedTuple):
    """The only representation of a user that leaves the service."""

    user_id: Optional[str]
    name: str
    username: str


class User(NamedTuple):
    """Represents a user account."""

    name: str
    """Display name."""

    username: str
    """Unique, case-sensitive login name."""

    password: str
    """Password digest. Never the plaintext once the user has been stored."""

    email: str
    """Unique e-mail address."""

    user_id: Optional[str] = None
    """Unique identifier for the user. If ``None``, the user does not exist."""

    profile_picture: Optional[str] = None
    """Reference to a profile picture, if the user has one."""

    role: Role = Role.STANDARD
    """Authorization role."""

    deleted_at: Optional[datetime] = None
    """When the user was soft-deleted; ``None`` for active users."""

    state: UserState = UserState.ACTIVE
    """Position in the deletion lifecycle."""

    @property
    def is_admin(self) -> bool:
        """Whether this user holds the ``admin`` role."""
        return self.role is Role.ADMIN

    @property
    def is_active(self) -> bool:
        """Whether this user is neither soft-deleted nor purged."""
        return self.state is UserState.ACTIVE

    def to_public(self) -> UserPublic:
        """Project this user onto the public view."""
        return UserPublic(user_id=self.user_id, name=self.name,
                          username=self.username)


class Token(NamedTuple):
    """A bearer credential bound to one user."""

    token_id: str
    user_id: str
    value: str


class Acronym(NamedTuple):
    """An acronym owned by a user."""

    short: str
    long: str
    user_id: str
    acronym_id: Optional[int] = None


def public_view(user: User) -> dict:
    """Get the JSON-ready public view of a user."""
    public = user.to_public()
    return {'id': public.user_id, 'name': public.name,
            'username': public.username}


def token_view(token: Token) -> dict:
    """Get the JSON-ready representation of a token."""
    return {'id': token.token_id, 'value': token.value,
            'user_id': token.user_id}


def acronym_view(acronym: Acronym) -> dict:
    """Get the JSON-ready representation of an acronym."""
    return {'id': acronym.acronym_id, 'short': acronym.short,
            'long': acronym.long, 'user_id': acronym.user_id}


def user_with_acronyms_view(user: User, acronyms: List[Acronym]) -> dict:
    """Get the combined view of a user and the acronyms they own."""
    data = public_view(user)
    data['acronyms'] = [acronym_view(acronym) for acronym in acronyms]
    return data

"""Testing helpers."""

from contextlib import contextmanager
from typing import Generator, Optional

from flask import Flask
from mimesis import Person
from mimesis.locales import Locale

from .. import accounts, util
from ... import domain


@contextmanager
def temporary_db(database_url: str = 'sqlite:///:memory:',
                 create: bool = True, drop: bool = True) -> Generator:
    """Provide an in-memory sqlite database for testing purposes."""
    app = Flask('foo')
    app.config['SQLALCHEMY_DATABASE_URI'] = database_url
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['TOKEN_BYTES'] = 16
    with app.app_context():
        util.init_app(app)
        if create:
            util.create_all()
        try:
            with util.transaction():
                yield util.current_session()
        finally:
            util.current_session().remove()
            if drop:
                util.drop_all()


def fake_user_data(person: Optional[Person] = None) -> dict:
    """Generate registration data for a plausible person."""
    person = person or Person(Locale.EN)
    return {
        'name': person.full_name(),
        'username': person.username(),
        'password': person.password(length=12),
        'email': person.email(domains=['@example.com'], unique=True)
    }


def register(role: domain.Role = domain.Role.STANDARD,
             **overrides: str) -> domain.User:
    """Register a fake user, with any fields overridden."""
    data = fake_user_data()
    data.update(overrides)
    return accounts.register(role=role, **data)

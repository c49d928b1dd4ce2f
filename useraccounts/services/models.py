"""User account database models."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, \
    UniqueConstraint, text
from sqlalchemy.orm import relationship
from flask_sqlalchemy import SQLAlchemy

from ..auth.tokens import MAX_TOKEN_LENGTH

db: SQLAlchemy = SQLAlchemy()


class DBUser(db.Model):  # type: ignore
    """
    User accounts.

    +-----------------+--------------+------+-----+------------+
    | Field           | Type         | Null | Key | Default    |
    +-----------------+--------------+------+-----+------------+
    | id              | varchar(36)  | NO   | PRI | NULL       |
    | name            | varchar(255) | NO   |     | NULL       |
    | username        | varchar(255) | NO   | UNI | NULL       |
    | password        | varchar(255) | NO   |     | NULL       |
    | email           | varchar(255) | NO   | UNI | NULL       |
    | profile_picture | varchar(255) | YES  |     | NULL       |
    | role            | enum         | NO   |     | 'standard' |
    | deleted_at      | datetime     | YES  | MUL | NULL       |
    +-----------------+--------------+------+-----+------------+

    The unique keys cover soft-deleted rows too.
    """

    __tablename__ = 'users'
    __table_args__ = (
        UniqueConstraint('username', name='uq_users_username'),
        UniqueConstraint('email', name='uq_users_email'),
    )

    user_id = Column('id', String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)
    """Digest."""
    email = Column(String(255), nullable=False)
    profile_picture = Column(String(255), nullable=True)
    role = Column(Enum('standard', 'admin', name='user_role'),
                  nullable=False, server_default=text("'standard'"))
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)


class DBToken(db.Model):  # type: ignore
    """Bearer tokens issued at login."""

    __tablename__ = 'tokens'

    token_id = Column('id', String(36), primary_key=True)
    value = Column(String(MAX_TOKEN_LENGTH), nullable=False, unique=True,
                   index=True)
    user_id = Column(ForeignKey('users.id', ondelete='CASCADE'),
                     nullable=False, index=True)

    user = relationship('DBUser')


class DBAcronym(db.Model):  # type: ignore
    """Acronyms, owned by users."""

    __tablename__ = 'acronyms'

    acronym_id = Column('id', Integer, primary_key=True, autoincrement=True)
    short = Column(String(255), nullable=False)
    long = Column(String(255), nullable=False)
    user_id = Column(ForeignKey('users.id', ondelete='CASCADE'),
                     nullable=False, index=True)

    user = relationship('DBUser')

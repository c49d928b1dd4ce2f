"""Input validation for account requests."""

from typing import Any, Dict

from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField, PasswordField
from wtforms.validators import DataRequired, Email, Length, AnyOf, \
    Optional, ValidationError

from .. import domain
from ..services.passwords import is_hashable, MAX_PASSWORD_BYTES


def hashable_password(form: Form, field: StringField) -> None:
    """The whole password must fit into a bcrypt digest."""
    if field.data and not is_hashable(field.data):
        raise ValidationError(
            f'Password must be at most {MAX_PASSWORD_BYTES} bytes long'
        )


class UserForm(Form):
    """Data for a new user account."""

    name = StringField('Name',
                       validators=[DataRequired(), Length(min=1, max=255)])
    username = StringField('Username',
                           validators=[DataRequired(), Length(min=1, max=255)])
    password = PasswordField('Password',
                             validators=[DataRequired(), hashable_password])
    email = StringField('Email address',
                        validators=[DataRequired(), Email(), Length(max=255)])
    profile_picture = StringField('Profile picture',
                                  validators=[Optional(), Length(max=255)])
    role = StringField('Role', validators=[
        Optional(), AnyOf([role.value for role in domain.Role])
    ])

    @classmethod
    def from_json(cls, payload: Any) -> 'UserForm':
        """
        Build the form from a decoded JSON body.

        Only string values are considered; anything else is treated as
        missing, so that validation reports it.
        """
        if not isinstance(payload, dict):
            payload = {}
        return cls(MultiDict({key: value for key, value in payload.items()
                              if isinstance(value, str)}))

    @property
    def role_value(self) -> domain.Role:
        """The requested role, defaulting to ``standard``."""
        if self.role.data:
            return domain.Role(self.role.data)
        return domain.Role.STANDARD

    @property
    def error_messages(self) -> Dict[str, list]:
        """Validation errors by field name."""
        return {name: list(errors) for name, errors in self.errors.items()}

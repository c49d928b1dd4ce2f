"""
Command-line tools for operating the accounts service.

.. code-block:: bash

   $ useraccounts create-user --username jane --email jane@example.com \
       --password s3cret --name "Jane Doe" --admin
   $ ADMIN_PASSWORD=s3cret useraccounts bootstrap-admin

"""

import click

from . import domain
from .factory import create_web_app
from .services import accounts, bootstrap, util
from .services.exceptions import ConstraintViolation, PasswordHashingFailed


@click.group()
def cli() -> None:
    """Manage user accounts."""


@cli.command('create-user')
@click.option('--username', prompt='Username')
@click.option('--email', prompt='Email address')
@click.option('--password', prompt='Password', hide_input=True,
              confirmation_prompt=True)
@click.option('--name', prompt='Display name')
@click.option('--admin', is_flag=True, default=False,
              help='Give the new user the admin role.')
def create_user(username: str, email: str, password: str, name: str,
                admin: bool) -> None:
    """Create a new user."""
    role = domain.Role.ADMIN if admin else domain.Role.STANDARD
    app = create_web_app()
    with app.app_context():
        util.create_all()
        try:
            user = accounts.register(name=name, username=username,
                                     password=password, email=email,
                                     role=role)
        except (ConstraintViolation, PasswordHashingFailed) as e:
            raise click.ClickException(str(e)) from e
    click.echo(f'Created user {user.username} with id {user.user_id}')


@cli.command('bootstrap-admin')
def bootstrap_admin() -> None:
    """Create the configured administrator, if it does not exist yet."""
    app = create_web_app()
    with app.app_context():
        util.create_all()
        admin = bootstrap.bootstrap_admin(
            username=app.config['ADMIN_USERNAME'],
            password=app.config['ADMIN_PASSWORD'],
            email=app.config['ADMIN_EMAIL'],
            name=app.config['ADMIN_NAME']
        )
    if admin is None:
        click.echo('Admin user already exists')
    else:
        click.echo(f'Created admin user {admin.username} with id '
                   f'{admin.user_id}')


if __name__ == '__main__':
    cli()

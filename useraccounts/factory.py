"""Application factory for the user accounts service."""

from typing import Any, Dict, Optional
import logging

from flask import Flask

from .app_logging import setup_logger
from .auth import Auth, tokens
from .routes import api
from .services import bootstrap, util

logger = logging.getLogger(__name__)


def create_web_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Initialize and configure the accounts application.

    Parameters
    ----------
    config : dict
        Overrides for the values in :mod:`useraccounts.config`. These are
        applied before the database is attached, so this is the place to
        point a test application at its own database.

    """
    app = Flask('useraccounts')
    app.config.from_pyfile('config.py')
    if config:
        app.config.update(config)
    _check_config(app)

    setup_logger(app.config['LOGLEVEL'])
    util.init_app(app)
    Auth(app)

    app.register_blueprint(api.health)
    app.register_blueprint(api.blueprint)

    if app.config['CREATE_DB']:
        with app.app_context():
            util.create_all()

    if app.config['BOOTSTRAP_ADMIN']:
        with app.app_context():
            bootstrap.bootstrap_admin(
                username=app.config['ADMIN_USERNAME'],
                password=app.config['ADMIN_PASSWORD'],
                email=app.config['ADMIN_EMAIL'],
                name=app.config['ADMIN_NAME']
            )

    logger.debug('Created application, version %s', app.config['VERSION'])
    return app


def _check_config(app: Flask) -> None:
    nbytes = app.config['TOKEN_BYTES']
    if not tokens.MIN_TOKEN_BYTES <= nbytes <= tokens.MAX_TOKEN_BYTES:
        raise RuntimeError(
            f'Configuration error: TOKEN_BYTES must be between '
            f'{tokens.MIN_TOKEN_BYTES} and {tokens.MAX_TOKEN_BYTES}, '
            f'not {nbytes}'
        )

"""Web Server Gateway Interface entry-point."""

import os

from useraccounts.factory import create_web_app

__flask_app__ = None


def application(environ, start_response):    # type: ignore
    """WSGI application."""
    for key, value in environ.items():
        # SERVER_NAME passed in by the server is usually a container id, and
        # must not override the configured value.
        if key == 'SERVER_NAME':
            continue
        # Request headers (e.g. credentials in HTTP_AUTHORIZATION) belong to
        # one request only.
        if key.startswith('HTTP_'):
            continue
        if isinstance(value, str):
            os.environ[key] = value

    global __flask_app__
    if __flask_app__ is None:
        __flask_app__ = create_web_app()
    return __flask_app__(environ, start_response)

"""Tests for the WSGI entry-point."""

import os
from unittest import TestCase, mock

import wsgi


class TestApplication(TestCase):
    """Tests for :func:`wsgi.application`."""

    def setUp(self):
        """Start without a cached application."""
        wsgi.__flask_app__ = None

    def tearDown(self):
        """Do not leak the mock application to other tests."""
        wsgi.__flask_app__ = None

    @mock.patch.dict(os.environ, {}, clear=False)
    @mock.patch('wsgi.create_web_app')
    def test_request_headers_stay_out_of_environment(self, mock_factory):
        """Credentials sent with a request are not copied to os.environ."""
        mock_app = mock.MagicMock(return_value=[b''])
        mock_factory.return_value = mock_app
        os.environ.pop('HTTP_AUTHORIZATION', None)
        environ = {
            'HTTP_AUTHORIZATION': 'Basic YWRtaW46czNjcmV0',
            'HTTP_COOKIE': 'session=abc123',
            'SERVER_NAME': 'a1b2c3d4',
            'SQLALCHEMY_DATABASE_URI': 'sqlite:///deployed.db',
            'wsgi.errors': mock.MagicMock()
        }
        start_response = mock.MagicMock()

        wsgi.application(environ, start_response)

        self.assertNotIn('HTTP_AUTHORIZATION', os.environ)
        self.assertNotIn('HTTP_COOKIE', os.environ)
        self.assertNotEqual(os.environ.get('SERVER_NAME'), 'a1b2c3d4')
        self.assertEqual(os.environ['SQLALCHEMY_DATABASE_URI'],
                         'sqlite:///deployed.db')
        mock_app.assert_called_once_with(environ, start_response)

    @mock.patch.dict(os.environ, {}, clear=False)
    @mock.patch('wsgi.create_web_app')
    def test_app_created_once(self, mock_factory):
        """The application is built on the first request and then reused."""
        mock_factory.return_value = mock.MagicMock(return_value=[b''])
        wsgi.application({}, mock.MagicMock())
        wsgi.application({}, mock.MagicMock())
        mock_factory.assert_called_once_with()

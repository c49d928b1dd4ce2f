"""Provides application for development purposes."""
from useraccounts.factory import create_web_app
from useraccounts.services import util

app = create_web_app()
with app.app_context():
    util.create_all()

"""
Pytest configuration and shared fixtures.
"""

import pytest

from app import create_app
from validation import ValidationPolicy


@pytest.fixture
def app():
    """Flask app that blocks calculations with blank fields."""
    flask_app = create_app(ValidationPolicy.ENFORCE)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def lenient_client():
    """Client for an app with blank-field validation switched off."""
    flask_app = create_app(ValidationPolicy.DISABLED)
    flask_app.config['TESTING'] = True
    return flask_app.test_client()

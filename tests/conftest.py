"""
Pytest configuration and shared fixtures for test suite

Provides Flask app, database, and client fixtures for testing.
"""
import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path so we can import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test database URI BEFORE importing app
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

# Import app and models AFTER setting environment
import app as app_module
from models import Channel, Program
from models import db as _db


@pytest.fixture(scope="function")
def app():
    """
    Create Flask app configured for testing

    Uses in-memory SQLite database that's reset between tests.
    """
    flask_app = app_module.app
    flask_app.config["TESTING"] = True

    with flask_app.app_context():
        _db.create_all()
        yield flask_app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    """
    Flask test client for making HTTP requests

    Use client.get(), client.post(), etc. to test routes.
    """
    return app.test_client()


@pytest.fixture(scope="function")
def db(app):
    """
    Database fixture with app context

    Provides access to db.session for direct database operations.
    """
    with app.app_context():
        yield _db


@pytest.fixture
def channels(db):
    """Two channels: CH1 first, CH2 second"""
    db.session.add_all(
        [
            Channel(id="CH1", name="WXYZ-TV (CH 7)", position=1),
            Channel(id="CH2", name="KROQ (CH 13)", position=2),
        ]
    )
    db.session.commit()
    return ["CH1", "CH2"]


@pytest.fixture
def morning_block(db, channels):
    """CH1: A 08:00/30, B 08:30/15, C 08:45/60; CH2: Z 08:00/90"""
    db.session.add_all(
        [
            Program(id="A", channel_id="CH1", title="Morning News", type="news", start_time="08:00", duration=30),
            Program(id="B", channel_id="CH1", title="Station Break", type="ad", start_time="08:30", duration=15),
            Program(id="C", channel_id="CH1", title="Cartoon Block", type="content", start_time="08:45", duration=60),
            Program(id="Z", channel_id="CH2", title="Music Videos", type="content", start_time="08:00", duration=90),
        ]
    )
    db.session.commit()
    return ["A", "B", "C", "Z"]

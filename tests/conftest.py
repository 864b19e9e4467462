import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app
from config import Config
from models import db, User, Note


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    LOG_FILE = None
    SEED_DEMO_DATA = False


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def owner(app):
    user = User(username='kody', name='Kody')
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def note(owner):
    note = Note(
        id='d27a197e',
        title='Basic Koala Facts',
        content='Koalas are found in the eucalyptus forests of eastern Australia. Basic facts first.',
        owner=owner,
    )
    db.session.add(note)
    db.session.commit()
    return note


def reload_note(note_id):
    db.session.expire_all()
    return db.session.get(Note, note_id)

import logging
from datetime import datetime, timedelta

import pytest

from app import create_app
from conftest import TestConfig
from models import db, User, Note, update_note, seed_demo_data
from request_logging import log_request


def test_secret_key_is_required():
    class NoSecretConfig(TestConfig):
        SECRET_KEY = None

    with pytest.raises(ValueError):
        create_app(NoSecretConfig)


def test_security_headers(client, app):
    response = client.get('/')

    assert response.headers['X-Frame-Options'] == 'DENY'
    assert response.headers['X-Content-Type-Options'] == 'nosniff'
    assert response.headers['Referrer-Policy'] == 'strict-origin-when-cross-origin'
    assert "frame-ancestors 'none'" in response.headers['Content-Security-Policy']
    assert response.headers['Server'] == app.config['SERVER_HEADER']
    assert app.config['SESSION_COOKIE_HTTPONLY'] is True
    assert app.config['SESSION_COOKIE_SAMESITE'] == 'Lax'
    assert app.config['PERMANENT_SESSION_LIFETIME'] == 1800


def test_index_lists_users(client, owner):
    response = client.get('/')

    assert response.status_code == 200
    assert '/users/kody/notes' in response.get_data(as_text=True)


def test_list_notes(client, note):
    response = client.get('/users/kody/notes')

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'Basic Koala Facts' in html
    assert '/users/kody/notes/d27a197e' in html


def test_list_notes_newest_update_first(client, note, owner):
    older = Note(
        id='a1b2c3d4',
        title='Old',
        content='old news',
        owner=owner,
        updated_at=datetime.utcnow() - timedelta(days=1),
    )
    db.session.add(older)
    db.session.commit()

    html = client.get('/users/kody/notes').get_data(as_text=True)

    assert html.index('>Basic Koala Facts<') < html.index('>Old<')


def test_list_notes_unknown_user(client, app):
    response = client.get('/users/nobody/notes')

    assert response.status_code == 404
    assert '404 User not found' in response.get_data(as_text=True)


def test_show_note(client, note):
    response = client.get('/users/kody/notes/d27a197e')

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert '<h1>Basic Koala Facts</h1>' in html
    assert '/users/kody/notes/d27a197e/edit' in html


def test_show_unknown_note_as_json(client, owner):
    response = client.get('/users/kody/notes/nope', headers={'Accept': 'application/json'})

    assert response.status_code == 404
    assert response.get_json() == {
        'status': 'error',
        'error': {'code': 404, 'message': 'No note with the id "nope" exists'},
    }


def test_unexpected_error_is_logged_and_rendered(app, caplog):
    app.config['PROPAGATE_EXCEPTIONS'] = False

    @log_request
    def boom():
        raise RuntimeError('kaboom')

    app.add_url_rule('/boom', 'boom', boom)

    with caplog.at_level(logging.ERROR, logger='notes_app'):
        response = app.test_client().get('/boom')

    assert response.status_code == 500
    assert 'Internal server error' in response.get_data(as_text=True)
    assert any('EXCEPTION in /boom: kaboom' in record.getMessage() for record in caplog.records)

    notes_records = [record for record in caplog.records if record.name == 'notes_app']
    assert len([record for record in notes_records if record.exc_info]) == 1
    assert any('UNHANDLED in /boom' in record.getMessage() for record in notes_records)


def test_update_note_refreshes_timestamp(app, note):
    note.updated_at = datetime.utcnow() - timedelta(days=1)
    db.session.commit()
    before = note.updated_at

    update_note(note, title='Koalas', content='koalas')

    assert note.title == 'Koalas'
    assert note.updated_at > before


def test_seed_demo_data_runs_once(app):
    assert seed_demo_data() is True
    assert seed_demo_data() is False

    user = User.query.filter_by(username='kody').one()
    assert len(user.notes) == 2


def test_demo_notes_pass_validation(app):
    seed_demo_data()

    for note in Note.query.all():
        first_word = note.title.split(' ')[0].lower()
        assert first_word in note.content.lower()


def test_create_app_seeds_when_enabled():
    class SeedConfig(TestConfig):
        SEED_DEMO_DATA = True

    app = create_app(SeedConfig)
    with app.app_context():
        assert User.query.filter_by(username='kody').count() == 1
        db.session.remove()
        db.drop_all()


def test_log_file_handler(tmp_path):
    log_file = tmp_path / 'notes_app.log'

    class FileLogConfig(TestConfig):
        LOG_FILE = str(log_file)

    app = create_app(FileLogConfig)
    app.test_client().get('/')

    for handler in logging.getLogger('notes_app').handlers:
        handler.flush()
    assert 'ENDPOINT: / | METHOD: GET' in log_file.read_text(encoding='utf-8')

    with app.app_context():
        db.session.remove()
        db.drop_all()


def test_gunicorn_serves_the_factory():
    import gunicorn_config

    assert gunicorn_config.wsgi_app == 'app:create_app()'
    assert gunicorn_config.workers >= 1

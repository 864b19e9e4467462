import secrets
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def generate_note_id():
    return secrets.token_hex(4)


class User(db.Model):
    """Owner of notes; the username is part of every note URL."""
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    notes = db.relationship('Note', backref='owner', lazy=True)

    def __repr__(self):
        return f'<User {self.username}>'


class Note(db.Model):
    id = db.Column(db.String(32), primary_key=True, default=generate_note_id)
    title = db.Column(db.String(100), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    owner_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)

    def __repr__(self):
        return f'<Note {self.title}>'


def update_note(note, title, content):
    """Persist an edit of an existing note and return it."""
    note.title = title
    note.content = content
    note.updated_at = datetime.utcnow()
    db.session.commit()
    return note


DEMO_USERNAME = 'kody'

DEMO_NOTES = [
    {
        'title': 'Basic Koala Facts',
        'content': 'Koalas are found in the eucalyptus forests of eastern Australia. '
                   'Basic facts: they sleep up to 20 hours a day.',
    },
    {
        'title': 'Koalas like to cuddle',
        'content': 'Cuddly critters, koalas measure about 60cm to 85cm long, '
                   'and weigh about 14kg.',
    },
]


def seed_demo_data():
    """Create the demo user with a few notes. Returns True if anything was created."""
    if User.query.filter_by(username=DEMO_USERNAME).first():
        return False

    user = User(username=DEMO_USERNAME, name='Kody')
    for note_data in DEMO_NOTES:
        user.notes.append(Note(**note_data))
    db.session.add(user)
    db.session.commit()
    return True

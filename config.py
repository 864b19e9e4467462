import os
from dotenv import load_dotenv

# Pick up variables from a local .env file
load_dotenv()


def env_flag(name, default=False):
    """Read a boolean flag from the environment ("1", "true", "yes", "on")."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Application settings, read once from the environment."""

    # No fallback: create_app refuses to start without it
    SECRET_KEY = os.environ.get('SECRET_KEY')

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///notes.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_FILE = os.environ.get('LOG_FILE', 'notes_app.log')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Demo user "kody" with a couple of notes
    SEED_DEMO_DATA = env_flag('SEED_DEMO_DATA', default=True)

    SESSION_COOKIE_SECURE = env_flag('SESSION_COOKIE_SECURE')  # True only behind HTTPS
    SERVER_HEADER = os.environ.get('SERVER_HEADER', 'NotesEditor/1.0')

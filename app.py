import os

from flask import Flask

from config import Config
from errors import register_error_handlers
from models import db, seed_demo_data
from request_logging import setup_logging, notes_logger
from routes import notes_bp
from security import setup_security


def create_app(config_class=Config):
    """Build the notes editor application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get('SECRET_KEY'):
        raise ValueError("SECRET_KEY is not set in the environment")

    setup_logging(app)

    db.init_app(app)

    # Security headers and session cookie settings (security.py)
    app = setup_security(app)

    app.register_blueprint(notes_bp)
    register_error_handlers(app)

    with app.app_context():
        db.create_all()
        if app.config.get('SEED_DEMO_DATA'):
            initialize_demo_data()

    return app


def initialize_demo_data():
    extra = {'ip': '-', 'user': 'system'}
    try:
        if seed_demo_data():
            notes_logger.info("Created demo user with notes", extra=extra)
    except Exception:
        db.session.rollback()
        notes_logger.error("Failed to create demo data", extra=extra, exc_info=True)
        raise


if __name__ == '__main__':
    debug_mode = os.environ.get('FLASK_ENV') == 'development'

    create_app().run(
        debug=debug_mode,
        host='localhost',
        port=int(os.environ.get('PORT', '5000')),
        threaded=True,
        use_reloader=False  # one logger setup per process
    )

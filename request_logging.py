import functools
import logging
from logging.handlers import RotatingFileHandler

from flask import request
from werkzeug.exceptions import HTTPException

LOGGER_NAME = 'notes_app'

# Time, client IP, user from the URL, message
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [IP:%(ip)s] [USER:%(user)s] - %(message)s'

notes_logger = logging.getLogger(LOGGER_NAME)


def setup_logging(app):
    """Configure the application logger from app.config (LOG_LEVEL, LOG_FILE)."""
    logger = notes_logger
    logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # create_app may run more than once per process (tests)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    log_file = app.config.get('LOG_FILE')
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def request_extra():
    """The ip/user fields every record from this logger must carry."""
    view_args = request.view_args or {}
    return {
        'ip': request.remote_addr,
        'user': view_args.get('username', 'anonymous'),
    }


def log_request(f):
    """Log every call of a view, and any exception leaving it."""
    @functools.wraps(f)
    def decorated_function(*args, **kwargs):
        extra = request_extra()

        notes_logger.info(
            f"ENDPOINT: {request.path} | METHOD: {request.method} | USER_AGENT: {request.user_agent.string[:100]}",
            extra=extra
        )

        # Field names only; note bodies stay out of the log
        if request.method == 'POST' and request.path.endswith('/edit'):
            notes_logger.warning(
                f"NOTE_EDIT: {request.path} | FIELDS: {sorted(request.form.keys())}",
                extra=extra
            )

        try:
            return f(*args, **kwargs)
        except HTTPException as e:
            notes_logger.warning(
                f"HTTP_{e.code} in {request.path}: {e.description}",
                extra=extra
            )
            raise
        except Exception as e:
            notes_logger.error(
                f"EXCEPTION in {request.path}: {str(e)}",
                extra=extra,
                exc_info=True
            )
            raise

    return decorated_function

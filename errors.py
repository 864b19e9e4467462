"""
Error handlers for the notes editor.

HTML clients get error.html, JSON clients get
{"status": "error", "error": {"code": ..., "message": ...}}.
"""

from flask import jsonify, render_template, request
from werkzeug.exceptions import HTTPException, InternalServerError

from request_logging import notes_logger, request_extra


def wants_json():
    """True when the client prefers JSON over HTML."""
    best = request.accept_mimetypes.best_match(['text/html', 'application/json'])
    return best == 'application/json'


def error_response(status_code, message):
    if wants_json():
        return jsonify(status='error', error={'code': status_code, 'message': message}), status_code
    return render_template('error.html', status_code=status_code, message=message), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(404)
    def handle_not_found(error):
        note_id = (request.view_args or {}).get('note_id')
        if note_id is not None:
            return error_response(404, f'No note with the id "{note_id}" exists')
        return error_response(404, f'404 {error.description}')

    @app.errorhandler(InternalServerError)
    def handle_internal_error(error):
        original = getattr(error, 'original_exception', None)
        if original is not None:
            # Traceback already logged by log_request
            notes_logger.error(
                f"UNHANDLED in {request.path}: {original!r}",
                extra=request_extra()
            )
        return error_response(500, 'Internal server error')

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return error_response(error.code, f'{error.code} {error.description}')

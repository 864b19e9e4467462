from flask import Response, current_app

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; "
    "script-src 'self'; "
    "style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data:; "
    "font-src 'self'; "
    "connect-src 'self'; "
    "form-action 'self'; "
    "frame-ancestors 'none';"
)


def add_security_headers(response: Response) -> Response:
    """Set HTTP security headers on every response"""
    response.headers['Content-Security-Policy'] = CONTENT_SECURITY_POLICY

    response.headers['X-Frame-Options'] = 'DENY'
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

    # Replace whatever the server put there
    response.headers['Server'] = current_app.config.get('SERVER_HEADER', 'NotesEditor/1.0')

    # HSTS belongs to the HTTPS terminator, not here

    return response


def setup_security(app):
    """Register the header middleware and harden the session cookie"""
    app.after_request(add_security_headers)

    app.config.update(
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE='Lax',
        SESSION_COOKIE_SECURE=app.config.get('SESSION_COOKIE_SECURE', False),
        PERMANENT_SESSION_LIFETIME=1800  # 30 minutes
    )

    return app

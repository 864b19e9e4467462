from flask import Blueprint, render_template, request, redirect, url_for, flash, abort, jsonify

from errors import wants_json
from forms import NoteEditForm
from models import User, Note, update_note
from request_logging import log_request, notes_logger, request_extra

notes_bp = Blueprint('notes', __name__)


def get_owner_or_404(username):
    return User.query.filter_by(username=username).first_or_404(description='User not found')


def get_note_or_404(username, note_id):
    """The note with this id, as long as it belongs to username."""
    return (
        Note.query
        .join(User, Note.owner_id == User.id)
        .filter(Note.id == note_id, User.username == username)
        .first_or_404(description='Note not found')
    )


@notes_bp.route('/')
@log_request
def index():
    """List of users with notes"""
    users = User.query.order_by(User.username).all()
    return render_template('index.html', users=users)


@notes_bp.route('/users/<username>/notes')
@log_request
def list_notes(username):
    owner = get_owner_or_404(username)
    notes = (
        Note.query
        .filter_by(owner_id=owner.id)
        .order_by(Note.updated_at.desc())
        .all()
    )
    return render_template('notes.html', owner=owner, notes=notes)


@notes_bp.route('/users/<username>/notes/<note_id>')
@log_request
def show_note(username, note_id):
    note = get_note_or_404(username, note_id)
    return render_template('note.html', note=note, username=username)


@notes_bp.route('/users/<username>/notes/<note_id>/edit', methods=['GET', 'POST'])
@log_request
def edit_note(username, note_id):
    """
    Edit page for one note.

    GET renders the form filled from the stored note. POST validates the
    submission on the server: on success the note is saved and the client is
    redirected to the note page, otherwise the form comes back with a 400 and
    the field and form errors.
    """
    note = get_note_or_404(username, note_id)

    # Submitted data wins over obj on POST
    form = NoteEditForm(obj=note)

    if request.method == 'GET':
        if wants_json():
            return jsonify(note={'title': note.title, 'content': note.content})
        return render_edit_page(form, note, username)

    for field_name in ('title', 'content'):
        if field_name not in request.form:
            abort(400, description=f'{field_name} must be a string')

    if not form.validate_on_submit():
        errors = form.error_summary()
        notes_logger.info(
            f"NOTE_EDIT_REJECTED: {note.id} | FORM_ERRORS: {len(errors['form_errors'])} | "
            f"FIELD_ERRORS: {sum(len(e) for e in errors['field_errors'].values())}",
            extra=request_extra()
        )
        if wants_json():
            return jsonify(status='error', errors=errors), 400
        return render_edit_page(form, note, username, errors=errors), 400

    update_note(note, title=form.title.data, content=form.content.data)
    flash('Note updated', 'success')
    return redirect(url_for('notes.show_note', username=username, note_id=note.id))


def render_edit_page(form, note, username, errors=None):
    return render_template(
        'edit.html',
        form=form,
        note=note,
        username=username,
        errors=errors or form.error_summary(),
    )

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SubmitField
from wtforms.validators import InputRequired, Length

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 10000


def first_title_word(title):
    """The word from the title that the content has to mention."""
    return title.split(' ')[0].lower()


class NoteEditForm(FlaskForm):
    """
    Form for editing an existing note.

    Field rules live in the validators below. The cross-field rule (content
    must include the first word of the title) is checked in validate() and
    reported through form_errors, since it does not belong to either input.
    FlaskForm adds the CSRF token and its check.
    """
    # InputRequired, not DataRequired: whitespace-only input is not "empty"
    title = StringField('Title', validators=[
        InputRequired(message='Title is required'),
        Length(max=TITLE_MAX_LENGTH,
               message=f'Title should contain no more than {TITLE_MAX_LENGTH} characters')
    ])
    content = TextAreaField('Content', validators=[
        InputRequired(message='Content is required'),
        Length(max=CONTENT_MAX_LENGTH,
               message=f'Content should contain no more than {CONTENT_MAX_LENGTH} characters')
    ])
    submit = SubmitField('Submit')

    def validate(self, extra_validators=None):
        valid = super().validate(extra_validators=extra_validators)

        # Checked even when the fields themselves are invalid
        word = first_title_word(self.title.data or '')
        if word not in (self.content.data or '').lower():
            self.form_errors.append(f'Content should include the word {word}')
            valid = False

        return valid

    def error_summary(self):
        """Errors split into form-level and per-field lists, all keys always present."""
        form_errors = list(self.form_errors)
        csrf_field = getattr(self, 'csrf_token', None)
        if csrf_field is not None:
            form_errors = list(csrf_field.errors) + form_errors

        return {
            'form_errors': form_errors,
            'field_errors': {
                'title': list(self.title.errors),
                'content': list(self.content.errors),
            },
        }

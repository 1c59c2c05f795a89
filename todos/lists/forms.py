from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length


def strip_whitespace(value):
    return value.strip() if value else value


class TodoListForm(FlaskForm):
    todo_list_title = StringField('List title',
                                  filters=[strip_whitespace],
                                  validators=[
                                      DataRequired(message='The list title is required.'),
                                      Length(min=1, max=100, message='List title must be between 1 and 100 characters.')
                                  ],
                                  render_kw={"placeholder": "Enter a title"})
    submit = SubmitField('Save')


class TodoForm(FlaskForm):
    todo_title = StringField('New todo',
                             filters=[strip_whitespace],
                             validators=[
                                 DataRequired(message='The todo title is required.'),
                                 Length(min=1, max=100, message='Todo title must be between 1 and 100 characters.')
                             ],
                             render_kw={"placeholder": "Something to do"})
    submit = SubmitField('Add')

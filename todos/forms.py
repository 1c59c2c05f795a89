from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import DataRequired, Length

from todos.lists.forms import strip_whitespace


class SignInForm(FlaskForm):
    username = StringField("Username", filters=[strip_whitespace], validators=[DataRequired(), Length(max=100)])
    password = PasswordField("Password", validators=[DataRequired()])
    submit = SubmitField("Sign In")

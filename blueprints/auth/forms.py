"""
Authentication forms using Flask-WTF.
Provides registration and login forms with CSRF protection.
Forms accept both form-encoded and JSON bodies.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField
from wtforms.validators import DataRequired, Length, Optional, AnyOf, ValidationError

from utils.validators import validate_phone as is_valid_phone


def first_error(form) -> str:
    """First validation message of a form, for JSON error responses."""
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return 'Datos no válidos'


class RegisterForm(FlaskForm):
    """New member registration form."""

    name = StringField('Nombre', validators=[
        DataRequired(message='El nombre es requerido'),
        Length(max=120)
    ])

    phone = StringField('Celular', validators=[
        DataRequired(message='El número de celular es requerido')
    ])

    password = PasswordField('Contraseña', validators=[
        DataRequired(message='La contraseña es requerida'),
        Length(min=6, message='La contraseña debe tener al menos 6 caracteres')
    ])

    def validate_phone(self, field):
        if not is_valid_phone(field.data):
            raise ValidationError('Formato de celular inválido')


class LoginForm(FlaskForm):
    """Login form with phone and password."""

    phone = StringField('Celular', validators=[
        DataRequired(message='El número de celular es requerido')
    ])

    password = PasswordField('Contraseña', validators=[
        DataRequired(message='La contraseña es requerida')
    ])

    # Role the member claims to log in as; 'admin' is checked against the store
    role = StringField('Rol', validators=[
        Optional(),
        AnyOf(['socio', 'admin'], message='Rol no válido')
    ])

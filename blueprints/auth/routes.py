"""
Authentication routes: register, login, logout, profile.
Session-based authentication for members and administrators.
"""

from flask import Blueprint, current_app
from flask_login import login_user, logout_user, login_required, current_user

from blueprints.auth.forms import RegisterForm, LoginForm, first_error
from models.user import (
    User, ROLE_ADMIN, create_user, get_user_by_id, get_user_by_phone,
    check_password, public_profile
)
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES
from utils.validators import sanitize_input

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/register', methods=['POST'])
def register():
    """
    Register a new member.

    Request body:
        name, phone, password

    Returns:
        201 with the new user ID
    """
    form = RegisterForm()
    if not form.validate_on_submit():
        return api_error(first_error(form), 400)

    user_id = create_user(
        name=sanitize_input(form.name.data, max_length=120),
        phone=form.phone.data,
        password=form.password.data
    )
    return api_success(data={'id': user_id}, message=MESSAGES['user_registered'], status=201)


@auth_bp.route('/login', methods=['POST'])
def login():
    """
    Log a member in.

    Request body:
        phone, password, role (optional: 'admin' requires an admin account)
    """
    form = LoginForm()
    if not form.validate_on_submit():
        return api_error(first_error(form), 400)

    user_dict = get_user_by_phone(form.phone.data)
    if user_dict is None or not check_password(user_dict, form.password.data):
        return api_error(MESSAGES['invalid_credentials'], 400)

    # The role chosen on the login screen must match the stored role
    if form.role.data == ROLE_ADMIN and user_dict.get('role') != ROLE_ADMIN:
        return api_error(MESSAGES['admin_required'], 403)

    user = User(user_dict)
    login_user(user)
    current_app.logger.info(f'User {user.id} logged in')

    return api_success(
        data={'id': user.id, 'name': user.name, 'role': user.role},
        message=MESSAGES['login_success'].format(name=user.name)
    )


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """Logout current user."""
    logout_user()
    return api_success(message=MESSAGES['logout_success'])


@auth_bp.route('/profile')
@login_required
def profile():
    """Current user's profile without the password hash."""
    user_dict = get_user_by_id(current_user.id)
    if not user_dict:
        return api_error(MESSAGES['user_not_found'], 404)

    return api_success(data=public_profile(user_dict))

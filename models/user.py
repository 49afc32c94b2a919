"""
User model and data access functions.
Handles member registration, authentication, and Flask-Login integration.
"""

import logging
import uuid
from datetime import datetime, timezone

from werkzeug.security import generate_password_hash, check_password_hash

from database import get_store
from models.exceptions import ValidationError
from utils.validators import normalize_phone

logger = logging.getLogger(__name__)

ROLE_MEMBER = 'socio'
ROLE_ADMIN = 'admin'
ROLES = (ROLE_MEMBER, ROLE_ADMIN)


class User:
    """
    User class for Flask-Login integration.
    Wraps the stored user dictionary with required Flask-Login properties.
    """

    def __init__(self, user_dict):
        """
        Initialize User from a stored record.

        Args:
            user_dict: Dictionary with user data from the store
        """
        self.id = user_dict['id']
        self.name = user_dict.get('name', '')
        self.phone = user_dict.get('phone', '')
        self.role = user_dict.get('role') or ROLE_MEMBER
        self.created_at = user_dict.get('created_at')

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    @property
    def is_authenticated(self):
        """Required by Flask-Login."""
        return True

    @property
    def is_active(self):
        """Required by Flask-Login."""
        return True

    @property
    def is_anonymous(self):
        """Required by Flask-Login."""
        return False

    def get_id(self):
        """Required by Flask-Login. Returns user ID as string."""
        return str(self.id)


def build_user(name: str, phone: str, password: str, role: str = ROLE_MEMBER) -> dict:
    """
    Build a new user record with a hashed password.

    Args:
        name: Display name
        phone: Mobile number (login identifier)
        password: Plain text password
        role: 'socio' or 'admin'

    Returns:
        User dict ready to append to the users collection
    """
    return {
        'id': str(uuid.uuid4()),
        'name': name,
        'phone': normalize_phone(phone),
        'password_hash': generate_password_hash(password),
        'role': role,
        'created_at': datetime.now(timezone.utc).isoformat(),
    }


def public_profile(user_dict: dict) -> dict:
    """User data without the password hash."""
    return {key: value for key, value in user_dict.items() if key != 'password_hash'}


def get_user_by_id(user_id: str) -> dict:
    """
    Get user by ID.

    Args:
        user_id: User ID

    Returns:
        User dict or None if not found
    """
    users = get_store().snapshot()['users']
    return next((u for u in users if u.get('id') == user_id), None)


def get_user_by_phone(phone: str) -> dict:
    """
    Get user by phone number.

    Args:
        phone: Phone number in any accepted spelling

    Returns:
        User dict or None if not found
    """
    phone = normalize_phone(phone)
    users = get_store().snapshot()['users']
    return next((u for u in users if u.get('phone') == phone), None)


def create_user(name: str, phone: str, password: str, role: str = ROLE_MEMBER) -> str:
    """
    Create a new user.

    Args:
        name: Display name
        phone: Mobile number, must be unique
        password: Plain text password (will be hashed)
        role: 'socio' or 'admin'

    Returns:
        New user ID

    Raises:
        ValidationError: If the phone is already registered or role unknown
    """
    if role not in ROLES:
        raise ValidationError(f'Rol no válido: {role}.')

    user = build_user(name, phone, password, role)

    with get_store().transaction() as state:
        if any(u.get('phone') == user['phone'] for u in state['users']):
            raise ValidationError('El número de celular ya está registrado.')
        state['users'].append(user)

    logger.info(f"[Users] Registered {role} {user['id']}")
    return user['id']


def check_password(user_dict: dict, password: str) -> bool:
    """
    Verify user password.

    Args:
        user_dict: User dictionary with password_hash
        password: Plain text password to check

    Returns:
        True if password matches
    """
    if not user_dict or not user_dict.get('password_hash'):
        return False
    return check_password_hash(user_dict['password_hash'], password)


def get_user_names(users: list) -> dict:
    """Map of user ID to display name."""
    return {u.get('id'): u.get('name') for u in users}

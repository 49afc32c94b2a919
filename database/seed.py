"""
Store seed data.
Initial data population for a fresh document.
"""

from flask import current_app


def seed_database(state: dict):
    """Insert the initial administrator into the document."""
    from models.user import build_user, ROLE_ADMIN

    config = current_app.config
    state['users'].append(build_user(
        name=config['ADMIN_NAME'],
        phone=config['ADMIN_PHONE'],
        password=config['ADMIN_PASSWORD'],
        role=ROLE_ADMIN
    ))

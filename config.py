"""
Flask application configuration classes.
Provides configuration for development, production, and testing environments.
"""

import os
from datetime import timedelta


class Config:
    """Base configuration class with common settings."""

    # Secret key for session management and CSRF protection
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Document store (single JSON file read and written in full)
    STORE_PATH = os.environ.get('STORE_PATH') or 'instance/db.json'

    # Security settings
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # CSRF token expires after 1 hour
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False  # Set to True in production with HTTPS
    PERMANENT_SESSION_LIFETIME = timedelta(
        hours=int(os.environ.get('SESSION_TIMEOUT_HOURS', 1))
    )

    # Timezone used for the self-cancellation deadline
    TIMEZONE = os.environ.get('TIMEZONE', 'America/Lima')

    # Members may cancel until this hour of the day before check-in
    CANCELLATION_CUTOFF_HOUR = 12

    # Cancelled reservations keep holding their rooms unless disabled
    COUNT_CANCELLED_RESERVATIONS = (
        os.environ.get('COUNT_CANCELLED_RESERVATIONS', 'true').lower() == 'true'
    )

    # Seed administrator (flask init-db)
    ADMIN_NAME = os.environ.get('ADMIN_NAME', 'Administrador')
    ADMIN_PHONE = os.environ.get('ADMIN_PHONE', '999999999')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')

    # Application settings
    APP_NAME = 'HotelClub'
    APP_VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False
    SESSION_COOKIE_SECURE = False
    WTF_CSRF_SSL_STRICT = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', 'true').lower() == 'true'
    WTF_CSRF_SSL_STRICT = SESSION_COOKIE_SECURE

    SECRET_KEY = os.environ.get('SECRET_KEY') or Config.SECRET_KEY
    STORE_PATH = os.environ.get('STORE_PATH') or Config.STORE_PATH

    PREFERRED_URL_SCHEME = 'https' if SESSION_COOKIE_SECURE else 'http'

    @classmethod
    def validate(cls) -> None:
        """Validate that required production environment variables are set."""
        secret_key = os.environ.get('SECRET_KEY')
        if not secret_key:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        if len(secret_key) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters in production")
        if not os.environ.get('STORE_PATH'):
            raise ValueError("STORE_PATH environment variable must be set in production")


class TestConfig(Config):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True
    WTF_CSRF_ENABLED = False  # Disable CSRF for tests
    STORE_PATH = os.environ.get('STORE_PATH', 'instance/test_db.json')
    SECRET_KEY = 'test-secret-key'
    COUNT_CANCELLED_RESERVATIONS = True


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test': TestConfig,
    'default': DevelopmentConfig
}

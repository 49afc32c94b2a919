"""
HotelClub - Member room reservations and food orders
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import extensions
from extensions import login_manager, csrf

# Import store functions
from database import init_store, init_db


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    if config_name == 'production':
        config[config_name].validate()

    # Attach the document store
    init_store(app)

    # Initialize extensions
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register CLI commands
    register_cli_commands(app)

    # Configure logging
    configure_logging(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    # Initialize Flask-Login
    login_manager.init_app(app)
    # Initialize CSRF Protection
    csrf.init_app(app)


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.auth.routes import auth_bp
    from blueprints.admin.routes import admin_bp
    from blueprints.api.routes import api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(api_bp, url_prefix='/api')


def register_error_handlers(app):
    """Register error handlers."""
    from models.exceptions import ReservationError, StoreUnavailable
    from utils.api_response import api_error, api_exception
    from utils.messages import MESSAGES

    @app.errorhandler(ReservationError)
    def reservation_error(error):
        """Turn domain errors into JSON rejections."""
        if isinstance(error, StoreUnavailable):
            app.logger.error(f'Store unavailable: {error.message}')
        return api_exception(error)

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        return api_error(MESSAGES['not_found'], 404)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        app.logger.error(f'Unhandled error: {error}', exc_info=True)
        return api_error(MESSAGES['internal_error'], 500)


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    def init_db_command():
        """Reset the store and seed the administrator."""
        click.echo('Initializing store...')
        with app.app_context():
            init_db()
        click.echo('Store initialized successfully!')

    @app.cli.command('create-admin')
    @click.argument('name')
    @click.argument('phone')
    @click.password_option()
    def create_admin_command(name, phone, password):
        """Create a new administrator."""
        from models.exceptions import ReservationError
        from models.user import create_user, ROLE_ADMIN

        with app.app_context():
            try:
                user_id = create_user(name=name, phone=phone, password=password, role=ROLE_ADMIN)
                click.echo(f'Admin created successfully! ID: {user_id}')
            except ReservationError as e:
                click.echo(f'Error creating admin: {e.message}', err=True)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        # Production logging
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler('logs/hotelclub.log')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        logging.getLogger('models').addHandler(file_handler)
        logging.getLogger('models').setLevel(logging.INFO)

        app.logger.setLevel(logging.INFO)
        app.logger.info('HotelClub startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)

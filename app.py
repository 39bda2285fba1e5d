"""
Portfolio Site - Main Application Entry Point
Built with the Application Factory Pattern

This module initializes the Flask application with its extensions,
configuration and hooks. All route handling is delegated to blueprints.
"""

import os
import logging
from datetime import datetime
from flask import Flask, render_template, request, jsonify
from config import get_config
from extensions import mailer
from utils.data import get_global_meta
from utils.relay import GENERIC_ERROR
from utils.security import add_security_headers
from utils.ui_helpers import inject_blueprint_assets, get_page_specific_class

from blueprints.api import api_bp
from blueprints.pages import pages_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    configure_logging(app)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio is running'}, 200

    return app


def configure_logging(app):
    """Apply LOG_LEVEL to the application logger"""
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if isinstance(level, int):
        app.logger.setLevel(level)
    else:
        app.logger.warning(f"Unknown LOG_LEVEL {app.config.get('LOG_LEVEL')!r}, keeping default")


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    mailer.init_app(app)


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp)


def _wants_json():
    return request.path.startswith('/api/')


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'error': 'Not found.'}), 404
        return render_template('404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        if _wants_json():
            return jsonify({'error': 'Method not allowed.'}), 405
        return e

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if _wants_json():
            return jsonify({'error': GENERIC_ERROR}), 500
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values every template can rely on"""
        blueprint_assets = inject_blueprint_assets()

        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        return {
            'current_year': datetime.now().year,
            'default_meta': get_global_meta(),
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'blueprint_scripts': blueprint_assets.get('blueprint_scripts', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': page_class
        }

    @app.after_request
    def after_request(response):
        return add_security_headers(response)


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')

    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )

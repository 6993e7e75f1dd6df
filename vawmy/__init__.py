"""
Vawmy Curtains - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the website and its admin panel.
"""

from datetime import datetime

from flask import Flask, render_template
from vawmy.extensions import api
from vawmy.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    from vawmy.services.auth_gate import current_admin_token
    api.init_app(app, token_loader=current_admin_token)

    # Register blueprints
    from vawmy.site import site_bp
    from vawmy.admin import admin_bp

    app.register_blueprint(site_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # Context processor for site name and admin flag
    @app.context_processor
    def inject_site_globals():
        """Inject `site_name` and `admin_authenticated` into templates."""
        from vawmy.services.auth_gate import current_admin_token
        return dict(site_name=app.config['SITE_NAME'],
                    admin_authenticated=current_admin_token() is not None)

    # Template filter for ISO dates
    @app.template_filter('format_date')
    def format_date_filter(value):
        return format_date(value)

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html'), 404

    return app


def format_date(value):
    """Render an ISO-8601 date as 'January 5, 2025'; unparseable values pass through."""
    if not value:
        return ''
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        except ValueError:
            return value
    return f'{parsed:%B} {parsed.day}, {parsed.year}'

"""
ConfManager - Application Factory
"""
import logging
import os

import click
from flask import Flask, request, render_template

from confmanager.backend import BackendError
from confmanager.extensions import babel, backend
from confmanager.routes import register_blueprints
from confmanager.settings import config


def get_locale():
    """Determine the best locale for the user."""
    lang = request.cookies.get('babel_translation')
    if lang:
        return lang
    return request.accept_languages.best_match(['es', 'en'])


def create_app(config_name=None):
    """Application Factory."""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))
    app.logger.setLevel(getattr(logging, app.config['LOG_LEVEL'].upper(), logging.INFO))

    # Initialize extensions
    babel.init_app(app, locale_selector=get_locale)
    backend.init_app(app)

    # Context processor for templates
    @app.context_processor
    def inject_conf_var():
        return dict(get_locale=get_locale)

    # Register blueprints
    register_blueprints(app)
    register_error_handlers(app)

    # CLI Commands
    register_cli_commands(app)

    return app


def register_error_handlers(app):
    """Render remote failures and access errors as pages."""

    @app.errorhandler(BackendError)
    def backend_error(error):
        return render_template('error.html', code=502, message=error.message), 502

    @app.errorhandler(403)
    def forbidden(error):
        return render_template('error.html', code=403, message=None), 403

    @app.errorhandler(404)
    def not_found(error):
        return render_template('error.html', code=404, message=None), 404

    @app.errorhandler(413)
    def too_large(error):
        return render_template('error.html', code=413, message=None), 413


def register_cli_commands(app):
    """Register CLI commands."""

    @app.cli.command("create-admin")
    @click.argument("email")
    @click.argument("name")
    def create_admin_command(email, name):
        """Creates an admin account with the temporary password."""
        from confmanager.services import users
        if users.get_user_by_email(email) is not None:
            click.echo(f"User {email} already exists.")
            return
        user, password = users.create_staff_user(email, name, 'admin')
        click.echo(f"Created admin {user.email}. Temporary password: {password}")

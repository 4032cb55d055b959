"""Routes package - Blueprint registration."""
from confmanager.routes.main import main_bp
from confmanager.routes.auth import auth_bp
from confmanager.routes.admin import admin_bp
from confmanager.routes.author import author_bp
from confmanager.routes.reviewer import reviewer_bp
from confmanager.routes.organizer import organizer_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(author_bp)
    app.register_blueprint(reviewer_bp)
    app.register_blueprint(organizer_bp)

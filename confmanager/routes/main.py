"""Main routes - view switch, language switching."""
from flask import Blueprint, session, request, redirect, make_response, url_for, current_app

main_bp = Blueprint('main', __name__)

VIEW_ENDPOINTS = {
    'login': 'auth.login',
    'change-password': 'auth.change_password',
    'admin-dashboard': 'admin.dashboard',
    'author-dashboard': 'author.dashboard',
    'reviewer-dashboard': 'reviewer.dashboard',
    'organizer-dashboard': 'organizer.dashboard',
}


def current_view():
    """Name of the screen the session user should see."""
    if 'user_id' not in session:
        return 'login'
    if session.get('needs_password_change'):
        return 'change-password'
    return f"{session.get('user_role')}-dashboard"


@main_bp.route('/')
def index():
    endpoint = VIEW_ENDPOINTS.get(current_view())
    if endpoint is None:
        # Unknown user_type: nothing to show, start over
        session.clear()
        endpoint = 'auth.login'
    return redirect(url_for(endpoint))


@main_bp.route('/set_language/<lang>')
def set_language(lang):
    if lang not in current_app.config['LANGUAGES']:
        lang = 'es'
    resp = make_response(redirect(request.referrer or '/'))
    resp.set_cookie('babel_translation', lang)
    return resp

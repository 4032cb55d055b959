"""Authentication routes and decorators."""
import re
from functools import wraps

from flask import Blueprint, redirect, url_for, session, request, render_template, flash, abort, current_app
from flask_babel import gettext as _

from confmanager.backend import BackendError
from confmanager.services import users

auth_bp = Blueprint('auth', __name__)

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def is_valid_email(email):
    return bool(EMAIL_RE.match(email or ''))


def start_session(user):
    session.clear()
    session['user_id'] = user.id
    session['user_email'] = user.email
    session['user_name'] = user.name
    session['user_role'] = user.user_type
    session['needs_password_change'] = user.needs_password_change


# ==================== RBAC Decorators (MUST be defined before routes that use them) ====================

def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user_id' not in session:
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return decorated_function


def role_required(roles):
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if 'user_id' not in session:
                return redirect(url_for('auth.login'))
            # Deactivation takes effect on the next request, not the next login
            profile = users.get_user(session['user_id'])
            if profile is not None and not profile.is_active:
                session.clear()
                flash(_('Tu cuenta está desactivada.'), 'error')
                return redirect(url_for('auth.login'))
            if session.get('needs_password_change'):
                return redirect(url_for('auth.change_password'))
            if session.get('user_role') not in roles:
                abort(403)  # Forbidden
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def admin_required(f):
    return role_required(['admin'])(f)


def author_required(f):
    return role_required(['author'])(f)


def reviewer_required(f):
    return role_required(['reviewer'])(f)


def organizer_required(f):
    return role_required(['organizer'])(f)


# ==================== Routes ====================

@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        error = None
        user = None

        if not email or not password.strip():
            error = _('Debes ingresar correo y contraseña.')
        elif not is_valid_email(email):
            error = _('Correo electrónico no válido.')
        else:
            try:
                user = users.sign_in(email, password)
            except BackendError as e:
                error = _('No se pudo ingresar: %(message)s', message=e.message)
            else:
                if user is None:
                    error = _('Usuario no encontrado o sin confirmar.')
                elif not user.is_active:
                    error = _('Tu cuenta está desactivada.')

        if error is None:
            start_session(user)
            current_app.logger.info('User %s logged in as %s', user.email, user.user_type)
            return redirect(url_for('main.index'))

        flash(error, 'error')
        return render_template('auth/login.html', email=email)

    return render_template('auth/login.html')


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    """Self-registration, for authors only."""
    if request.method == 'POST':
        name = request.form.get('name', '').strip()
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        error = None

        if not name or not email or not password.strip():
            error = _('Completa todos los campos.')
        elif not is_valid_email(email):
            error = _('Correo electrónico no válido.')
        else:
            try:
                users.sign_up(email, password, name)
            except BackendError as e:
                error = _('No se pudo registrar: %(message)s', message=e.message)

        if error is None:
            flash(_('¡Registro exitoso! Revisa tu correo y confirma tu cuenta para poder ingresar.'), 'success')
            return redirect(url_for('auth.login'))

        flash(error, 'error')
        return render_template('auth/signup.html', name=name, email=email)

    return render_template('auth/signup.html')


@auth_bp.route('/change-password', methods=['GET', 'POST'])
@login_required
def change_password():
    if request.method == 'POST':
        new_password = request.form.get('new_password', '')
        confirm = request.form.get('confirm', '')
        error = None

        if len(new_password) < current_app.config['MIN_PASSWORD_LENGTH']:
            error = _('La contraseña debe tener al menos %(num)d caracteres.',
                      num=current_app.config['MIN_PASSWORD_LENGTH'])
        elif new_password != confirm:
            error = _('Las contraseñas no coinciden.')
        else:
            message = _('Contraseña cambiada correctamente.'), 'success'
            try:
                users.change_password(session['user_id'], new_password)
            except BackendError as e:
                if e.operation != 'clear_password_flag':
                    error = _('No se pudo cambiar la contraseña.')
                else:
                    # The new password is already active in the auth service
                    message = _('Contraseña cambiada, pero no se pudo actualizar tu perfil.'), 'warning'

        if error is None:
            session['needs_password_change'] = False
            flash(*message)
            return redirect(url_for('main.index'))

        flash(error, 'error')

    return render_template('auth/change_password.html')


@auth_bp.route('/logout')
def logout():
    session.clear()
    return redirect(url_for('auth.login'))

"""Admin routes - user management."""
from flask import Blueprint, render_template, redirect, url_for, session, request, flash, abort
from flask_babel import gettext as _

from confmanager.backend import BackendError
from confmanager.models import STAFF_TYPES
from confmanager.routes.auth import admin_required, is_valid_email
from confmanager.services import users

admin_bp = Blueprint('admin', __name__)


def render_dashboard(form=None, show_form=False):
    return render_template(
        'admin/dashboard.html',
        users=users.list_users(),
        staff_types=STAFF_TYPES,
        form=form or {},
        show_form=show_form or form is not None,
        current_user_id=session.get('user_id'),
    )


@admin_bp.route('/admin')
@admin_required
def dashboard():
    """List all users with the account creation form."""
    return render_dashboard(show_form=request.args.get('new') == '1')


@admin_bp.route('/admin/users', methods=['POST'])
@admin_required
def create_user():
    """Create an organizer, reviewer or admin account."""
    email = request.form.get('email', '').strip()
    name = request.form.get('name', '').strip()
    user_type = request.form.get('user_type', 'organizer')

    if not email or not name:
        flash(_('Completa todos los campos.'), 'error')
        return render_dashboard(form=request.form)

    if not is_valid_email(email):
        flash(_('Correo electrónico no válido.'), 'error')
        return render_dashboard(form=request.form)

    if user_type not in STAFF_TYPES:
        user_type = 'organizer'

    try:
        if users.get_user_by_email(email) is not None:
            flash(_('Ese email ya está registrado.'), 'error')
            return render_dashboard(form=request.form)
        user, password = users.create_staff_user(email, name, user_type)
    except BackendError as e:
        flash(_('No se pudo crear el usuario: %(message)s', message=e.message), 'error')
        return render_dashboard(form=request.form)

    flash(_('¡Usuario creado! Contraseña: %(password)s', password=password), 'success')
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/admin/users/<user_id>/toggle', methods=['POST'])
@admin_required
def toggle_active(user_id):
    """Activate or deactivate a user."""
    user = users.get_user(user_id)
    if user is None:
        abort(404)

    # Prevent admin from locking themselves out
    if user.id == session.get('user_id'):
        flash(_('No puedes desactivar tu propia cuenta.'), 'error')
        return redirect(url_for('admin.dashboard'))

    users.set_active(user.id, not user.is_active)
    if user.is_active:
        flash(_('Usuario %(email)s desactivado.', email=user.email), 'success')
    else:
        flash(_('Usuario %(email)s activado.', email=user.email), 'success')
    return redirect(url_for('admin.dashboard'))

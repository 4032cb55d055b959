"""User accounts: the auth service plus the `users` profile table."""
from flask import current_app

from confmanager.backend import remote_call
from confmanager.extensions import backend
from confmanager.models import User
from confmanager.services import first_row, utc_now_iso

USERS_TABLE = 'users'


def get_user(user_id):
    with remote_call('get_user'):
        resp = backend.table(USERS_TABLE).select('*').eq('id', user_id).limit(1).execute()
    row = first_row(resp)
    return User.from_row(row) if row else None


def get_user_by_email(email):
    with remote_call('get_user_by_email'):
        resp = backend.table(USERS_TABLE).select('*').eq('email', email).limit(1).execute()
    row = first_row(resp)
    return User.from_row(row) if row else None


def list_users(user_type=None):
    """All users, newest first, optionally restricted to one user_type."""
    with remote_call('list_users'):
        query = backend.table(USERS_TABLE).select('*')
        if user_type:
            query = query.eq('user_type', user_type)
        resp = query.order('created_at', desc=True).execute()
    return [User.from_row(row) for row in resp.data or []]


def insert_profile(user_id, email, name, user_type, needs_password_change=False):
    row = {
        'id': user_id,
        'email': email,
        'name': name,
        'user_type': user_type,
        'is_active': True,
        'needs_password_change': needs_password_change,
        'created_at': utc_now_iso(),
    }
    with remote_call('insert_profile'):
        resp = backend.table(USERS_TABLE).insert([row]).execute()
    return User.from_row(first_row(resp) or row)


def sign_in(email, password):
    """
    Authenticate against the auth service and load the user's profile.

    The `users` row wins over the auth metadata when both exist. Returns
    None when the service answers without a user.
    """
    client = backend.auth_client()
    with remote_call('sign_in'):
        resp = client.auth.sign_in_with_password({'email': email, 'password': password})
    auth_user = getattr(resp, 'user', None)
    if auth_user is None:
        return None
    return get_user(str(auth_user.id)) or User.from_auth_user(auth_user)


def sign_up(email, password, name):
    """
    Register an author in the auth service and mirror it in `users`.

    The profile row reuses the auth user id. It is only inserted when no row
    with that id exists yet; the check is not atomic.
    """
    client = backend.auth_client()
    with remote_call('sign_up'):
        resp = client.auth.sign_up({
            'email': email,
            'password': password,
            'options': {'data': {'name': name, 'user_type': 'author'}},
        })
    auth_user = getattr(resp, 'user', None)
    if auth_user is not None and get_user(str(auth_user.id)) is None:
        insert_profile(str(auth_user.id), email, name, 'author')
    return auth_user


def create_staff_user(email, name, user_type):
    """
    Create a confirmed account with the temporary password.

    The user is sent to the change-password screen on first login.
    Returns (user, temporary_password).
    """
    password = current_app.config['DEFAULT_TEMP_PASSWORD']
    client = backend.auth_client()
    with remote_call('create_staff_user'):
        resp = client.auth.admin.create_user({
            'email': email,
            'password': password,
            'email_confirm': True,
            'user_metadata': {'name': name, 'user_type': user_type},
        })
    user = insert_profile(str(resp.user.id), email, name, user_type, needs_password_change=True)
    current_app.logger.info('Created %s account %s', user_type, email)
    return user, password


def set_active(user_id, active):
    with remote_call('set_active'):
        backend.table(USERS_TABLE).update({'is_active': active}).eq('id', user_id).execute()


def change_password(user_id, new_password):
    """
    Set a new password in the auth service, then clear the pending flag.

    The two steps fail separately: a BackendError from the second one has
    operation `clear_password_flag` and means the password did change.
    """
    client = backend.auth_client()
    with remote_call('change_password'):
        client.auth.admin.update_user_by_id(user_id, {'password': new_password})
    with remote_call('clear_password_flag'):
        backend.table(USERS_TABLE).update({'needs_password_change': False}).eq('id', user_id).execute()

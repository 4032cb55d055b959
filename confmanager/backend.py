"""Supabase backend: tables, storage bucket and auth, behind one extension."""
from contextlib import contextmanager

from flask import current_app
from postgrest.exceptions import APIError
from supabase import AuthError, StorageException, create_client


REMOTE_ERRORS = (APIError, AuthError, StorageException)


class BackendError(Exception):
    """A failed call to the remote service, with its message verbatim."""

    def __init__(self, message, operation=None):
        super().__init__(message)
        self.message = message
        self.operation = operation


@contextmanager
def remote_call(operation):
    """Log and re-raise client exceptions as BackendError."""
    try:
        yield
    except REMOTE_ERRORS as exc:
        message = getattr(exc, 'message', None) or str(exc)
        current_app.logger.error('%s failed: %s', operation, message)
        raise BackendError(message, operation) from exc


class _BackendState:
    def __init__(self, url, key, bucket, client_factory):
        self.url = url
        self.key = key
        self.bucket = bucket
        self.client_factory = client_factory
        self.client = None


class SupabaseBackend:
    """Flask extension holding the Supabase client of each app.

    The data client is created lazily on first use and shared by every
    request. Auth calls get a fresh client each time so that a signed-in
    session never leaks from one user to the next.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app, client_factory=None):
        app.extensions['supabase'] = _BackendState(
            url=app.config.get('SUPABASE_URL'),
            key=app.config.get('SUPABASE_KEY'),
            bucket=app.config.get('SUPABASE_BUCKET', 'articulos'),
            client_factory=client_factory or create_client,
        )

    @property
    def state(self):
        return current_app.extensions['supabase']

    @property
    def client(self):
        state = self.state
        if state.client is None:
            current_app.logger.debug('Connecting to Supabase at %s', state.url)
            state.client = state.client_factory(state.url, state.key)
        return state.client

    def table(self, name):
        return self.client.table(name)

    def bucket(self):
        return self.client.storage.from_(self.state.bucket)

    def auth_client(self):
        state = self.state
        return state.client_factory(state.url, state.key)

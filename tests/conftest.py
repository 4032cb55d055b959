from __future__ import annotations

from typing import Callable

import pytest
from flask import Flask
from flask.testing import FlaskClient

from confmanager import create_app
from tests.fakes import FakeSupabase


@pytest.fixture
def fake() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def app(fake: FakeSupabase) -> Flask:
    """Testing app whose backend client is the in-memory fake."""
    app = create_app("testing")
    app.extensions["supabase"].client_factory = lambda url, key: fake
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def login_as(client: FlaskClient, fake: FakeSupabase) -> Callable[..., str]:
    """Create an account of the given type, log in through /login, return its id."""

    def _login(user_type: str, email: str = "", password: str = "secret1", **profile) -> str:
        email = email or f"{user_type}@example.com"
        user_id = fake.add_account(email, password, name=f"{user_type.title()} User", user_type=user_type, **profile)
        resp = client.post("/login", data={"email": email, "password": password})
        assert resp.status_code == 302
        fake.calls.clear()
        return user_id

    return _login

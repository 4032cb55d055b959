from __future__ import annotations

import csv
import io

from flask.testing import FlaskClient

from tests.fakes import FakeSupabase

CONFERENCE = {
    "name": "PyCon Lima",
    "description": "Python conference",
    "deadline": "2026-03-01",
    "conference_date": "2026-05-10",
    "location": "Lima",
}


def _text(resp) -> str:
    return resp.get_data(as_text=True)


def test_create_conference(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    resp = client.post("/organizer/conferences", data=CONFERENCE)
    assert resp.status_code == 302

    [conf] = fake.rows("conferences")
    assert conf["name"] == "PyCon Lima"
    assert conf["status"] == "active"
    assert conf["created_at"]
    html = _text(client.get("/organizer"))
    assert "Conferencia creada." in html
    assert "PyCon Lima" in html


def test_create_conference_requires_every_field(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    resp = client.post("/organizer/conferences", data=dict(CONFERENCE, location=""))
    assert "Todos los campos son obligatorios." in _text(resp)
    assert fake.rows("conferences") == []


def test_create_conference_rejects_bad_dates(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    resp = client.post("/organizer/conferences", data=dict(CONFERENCE, deadline="next week"))
    assert "Fecha inválida." in _text(resp)
    assert fake.rows("conferences") == []


def test_assign_reviewer(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    reviewer_id = fake.add_account("rev@example.com", name="Rita", user_type="reviewer")
    article = fake.add_row("articles", title="Paper")

    resp = client.post("/organizer/assignments", data={"article_id": article["id"], "reviewer_id": reviewer_id})
    assert resp.status_code == 302
    [assignment] = fake.rows("article_reviewers")
    assert assignment["article_id"] == article["id"]
    assert assignment["reviewer_id"] == reviewer_id

    html = _text(client.get("/organizer"))
    assert "¡Revisor asignado!" in html
    assert "Rita (rev@example.com)" in html


def test_assign_reviewer_twice_is_rejected(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    fake.add_row("article_reviewers", article_id="7", reviewer_id="r1")
    client.post("/organizer/assignments", data={"article_id": "7", "reviewer_id": "r1"})
    assert len(fake.rows("article_reviewers")) == 1
    assert "Ya asignado." in _text(client.get("/organizer"))


def test_assign_reviewer_requires_both_ids(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    client.post("/organizer/assignments", data={"article_id": "7", "reviewer_id": ""})
    assert "Selecciona artículo y revisor." in _text(client.get("/organizer"))
    assert fake.rows("article_reviewers") == []


def test_assign_reviewer_surfaces_remote_error(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    fake.fail("article_reviewers", "insert", "row-level security")
    client.post("/organizer/assignments", data={"article_id": "7", "reviewer_id": "r1"})
    assert "Error en la asignación: row-level security" in _text(client.get("/organizer"))


def test_dashboard_lists_only_reviewers(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    fake.add_account("rev@example.com", name="Rita", user_type="reviewer")
    fake.add_account("auth@example.com", name="Aldo", user_type="author")
    html = _text(client.get("/organizer"))
    assert "Rita (rev@example.com)" in html
    assert "Aldo (auth@example.com)" not in html


def test_export_articles_csv(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("organizer")
    author_id = fake.add_account("auth@example.com", name="Aldo", user_type="author")
    reviewer_id = fake.add_account("rev@example.com", name="Rita", user_type="reviewer")
    conf = fake.add_row("conferences", name="PyCon Lima")
    article = fake.add_row(
        "articles", title="Paper", user_id=author_id, conference_id=conf["id"],
        status="aceptado", version=1, keywords="a, b", file_url="https://x/p.pdf",
    )
    fake.add_row("article_reviewers", article_id=article["id"], reviewer_id=reviewer_id)

    resp = client.get("/organizer/articles.csv")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    rows = list(csv.reader(io.StringIO(_text(resp))))
    assert rows[0][:5] == ["ID", "Title", "Author", "Conference", "Status"]
    assert rows[1] == [article["id"], "Paper", "Aldo", "PyCon Lima", "aceptado", "1", "a, b", "Rita", "https://x/p.pdf"]

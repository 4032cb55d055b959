from __future__ import annotations

from io import BytesIO

from flask.testing import FlaskClient

from confmanager.services.storage import allowed_file, build_object_path, sanitize_filename
from tests.fakes import FakeSupabase


def _text(resp) -> str:
    return resp.get_data(as_text=True)


def _form(conference_id: str, filename: str = "Artículo final.pdf", **overrides):
    data = {
        "title": "Deep Parsing",
        "abstract": "We parse deeply.",
        "keywords": "parsing, nlp",
        "conference_id": conference_id,
        "file": (BytesIO(b"%PDF-1.4 data"), filename),
    }
    data.update(overrides)
    return data


def test_sanitize_filename_strips_accents_and_symbols() -> None:
    assert sanitize_filename("Artículo final (v2).pdf") == "Articulo_final__v2_.pdf"
    assert sanitize_filename("ñandú-ok_1.docx") == "nandu-ok_1.docx"


def test_object_path_is_scoped_to_user() -> None:
    assert build_object_path("u1", "Résumé.pdf", millis=1700000000000) == "u1/1700000000000_Resume.pdf"


def test_allowed_file_extensions() -> None:
    assert allowed_file("paper.PDF")
    assert allowed_file("paper.docx")
    assert not allowed_file("paper.exe")
    assert not allowed_file("")


def test_dashboard_shows_only_own_articles(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    user_id = login_as("author")
    fake.add_row("articles", title="Mine", user_id=user_id, status="enviado")
    fake.add_row("articles", title="Theirs", user_id="someone-else", status="enviado")
    html = _text(client.get("/author"))
    assert "Mine" in html
    assert "Theirs" not in html


def test_dashboard_without_articles(client: FlaskClient, login_as) -> None:
    login_as("author")
    assert "No tienes artículos" in _text(client.get("/author"))


def test_submit_article_uploads_and_records(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    user_id = login_as("author")
    conf = fake.add_row("conferences", name="PyCon", status="active")

    resp = client.post("/author/articles", data=_form(conf["id"]), content_type="multipart/form-data")
    assert resp.status_code == 302

    [(bucket, path)] = list(fake.storage.objects)
    assert bucket == "articulos"
    assert path.startswith(f"{user_id}/")
    assert path.endswith("_Articulo_final.pdf")

    [article] = fake.rows("articles")
    assert article["status"] == "enviado"
    assert article["version"] == 1
    assert article["user_id"] == user_id
    assert article["conference_id"] == conf["id"]
    assert article["file_name"] == "Artículo final.pdf"
    assert article["file_url"].endswith(f"/articulos/{path}")
    assert article["keywords"] == "parsing, nlp"


def test_submit_article_requires_fields_and_file(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("author")
    conf = fake.add_row("conferences", name="PyCon")
    data = _form(conf["id"])
    del data["file"]
    resp = client.post("/author/articles", data=data, content_type="multipart/form-data")
    assert "Todos los campos y el archivo son obligatorios." in _text(resp)

    resp = client.post("/author/articles", data=_form(conf["id"], title=""), content_type="multipart/form-data")
    assert "Todos los campos y el archivo son obligatorios." in _text(resp)
    assert fake.rows("articles") == []


def test_submit_article_rejects_other_formats(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("author")
    conf = fake.add_row("conferences", name="PyCon")
    resp = client.post(
        "/author/articles", data=_form(conf["id"], filename="virus.exe"), content_type="multipart/form-data"
    )
    assert "Formato de archivo no permitido." in _text(resp)
    assert fake.storage.objects == {}


def test_submit_article_storage_error(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("author")
    conf = fake.add_row("conferences", name="PyCon")
    fake.storage.upload_error = "Bucket not found"
    resp = client.post("/author/articles", data=_form(conf["id"]), content_type="multipart/form-data")
    assert "Error subiendo el archivo: Bucket not found" in _text(resp)
    assert fake.rows("articles") == []


def test_submit_article_database_error(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("author")
    conf = fake.add_row("conferences", name="PyCon")
    fake.fail("articles", "insert", "violates foreign key constraint")
    resp = client.post("/author/articles", data=_form(conf["id"]), content_type="multipart/form-data")
    assert "Error guardando en la base de datos: violates foreign key constraint" in _text(resp)


def test_submit_article_over_size_limit(client: FlaskClient, fake: FakeSupabase, login_as) -> None:
    login_as("author")
    conf = fake.add_row("conferences", name="PyCon")
    too_big = BytesIO(b"0" * (client.application.config["MAX_CONTENT_LENGTH"] + 1))
    resp = client.post(
        "/author/articles", data=_form(conf["id"], file=(too_big, "huge.pdf")), content_type="multipart/form-data"
    )
    assert resp.status_code == 413
    assert "El archivo excede el tamaño máximo permitido." in _text(resp)
    assert fake.storage.objects == {}
    assert fake.rows("articles") == []

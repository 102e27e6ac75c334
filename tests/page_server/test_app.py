# tests/page_server/test_app.py
from pathlib import Path

import pytest

from page_server.server.app import create_app, resolve_port

INDEX_HTML = "<!DOCTYPE html><html><body><h1>Bitstarter</h1><p>café</p></body></html>"


@pytest.fixture
def site(tmp_path):
    index_file = tmp_path / "index.html"
    index_file.write_text(INDEX_HTML, encoding="utf-8")
    public = tmp_path / "public"
    public.mkdir()
    (public / "style.css").write_text("h1 { color: red; }", encoding="utf-8")
    (public / "img").mkdir()
    (public / "img" / "logo.txt").write_text("logo", encoding="utf-8")
    return index_file, public


@pytest.fixture
def client(site):
    index_file, public = site
    app = create_app(index_file, public)
    app.config["TESTING"] = True
    return app.test_client()


def test_root_returns_index_bytes(client, site):
    index_file, _ = site
    response = client.get("/")
    assert response.status_code == 200
    assert response.data == index_file.read_bytes()
    assert response.mimetype == "text/html"


def test_root_reads_file_fresh_each_request(client, site):
    index_file, _ = site
    first = client.get("/").data
    index_file.write_text("<h1>Changed</h1>", encoding="utf-8")
    second = client.get("/").data
    assert first == INDEX_HTML.encode("utf-8")
    assert second == b"<h1>Changed</h1>"


def test_repeated_root_requests_are_identical(client):
    assert client.get("/").data == client.get("/").data


def test_static_asset_served_with_content_type(client):
    response = client.get("/style.css")
    assert response.status_code == 200
    assert response.data == b"h1 { color: red; }"
    assert response.mimetype == "text/css"


def test_nested_static_asset(client):
    response = client.get("/img/logo.txt")
    assert response.status_code == 200
    assert response.data == b"logo"


def test_unknown_path_is_404(client):
    assert client.get("/missing.js").status_code == 404
    assert client.get("/no/such/page").status_code == 404


def test_missing_index_file_is_500(tmp_path):
    app = create_app(tmp_path / "gone.html", tmp_path)
    response = app.test_client().get("/")
    assert response.status_code == 500


def test_relative_paths_resolve_against_cwd(site, monkeypatch):
    index_file, _ = site
    monkeypatch.chdir(index_file.parent)
    app = create_app("index.html", "public")
    assert Path(app.config["INDEX_FILE"]).resolve() == index_file.resolve()
    assert app.test_client().get("/style.css").status_code == 200


def test_resolve_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert resolve_port() == 5000
    monkeypatch.setenv("PORT", "8123")
    assert resolve_port() == 8123
    assert resolve_port(9000) == 9000


def test_resolve_port_rejects_non_numeric_env(monkeypatch, caplog):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(SystemExit) as exc_info:
        resolve_port()
    assert exc_info.value.code == 1
    assert "'eighty'" in caplog.text

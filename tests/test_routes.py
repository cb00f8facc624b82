"""
HTTP surface tests through FastAPI's TestClient.
"""
import re
from unittest.mock import MagicMock, patch

import pytest
from redis.exceptions import ConnectionError

from zanile.config import Settings
from zanile.database import NoteStore
from zanile.exceptions import AllocationExhausted


def create(client, **body):
    return client.post("/api/create", json=body)


class TestPages:
    @pytest.mark.parametrize("path", ["/", "/index.html"])
    def test_home(self, client, path):
        r = client.get(path)
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert "zanile clipboard" in r.text

    def test_about(self, client):
        r = client.get("/about")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")

    def test_health(self, client):
        r = client.get("/api/healthz")
        assert r.status_code == 200
        assert r.json() == {"ok": True}


class TestCreate:
    def test_random_id(self, client):
        r = create(client, text="hello")
        assert r.status_code == 201
        data = r.json()
        assert re.fullmatch(r"[a-z0-9]{8}", data["id"])
        assert data["url"] == f"http://testserver/{data['id']}"

    def test_custom_id(self, client):
        r = create(client, text="hello", id="My Note!!")
        assert r.status_code == 201
        assert r.json() == {"id": "my-note", "url": "http://testserver/my-note"}

    def test_duplicate_custom_id(self, client):
        assert create(client, text="first", id="dup").status_code == 201
        r = create(client, text="second", id="dup")
        assert r.status_code == 409
        assert r.json() == {"error": "ID already exists"}

    @pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": "", "id": "abc"}, {"text": 42}, {"text": None}])
    def test_text_required(self, client, body):
        r = client.post("/api/create", json=body)
        assert r.status_code == 400
        assert r.json() == {"error": "Text is required"}

    def test_non_object_body_has_no_text(self, client):
        r = client.post("/api/create", json=["hello"])
        assert r.status_code == 400
        assert r.json() == {"error": "Text is required"}

    @pytest.mark.parametrize("custom_id", ["!!!", "a" * 65])
    def test_invalid_id(self, client, custom_id):
        r = create(client, text="hello", id=custom_id)
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid id"}

    @pytest.mark.parametrize("custom_id", ["", 123, None])
    def test_unusable_id_falls_back_to_random(self, client, custom_id):
        r = create(client, text="hello", id=custom_id)
        assert r.status_code == 201
        assert len(r.json()["id"]) == 8

    def test_too_large(self, make_client, memory_store):
        client = make_client(Settings(max_bytes=10, app_domain=""), memory_store)
        r = create(client, text="é" * 6)
        assert r.status_code == 413
        assert r.json() == {"error": "Too large. Limit 10 bytes"}
        assert memory_store.redis.store == {}

    @pytest.mark.parametrize("body", [b"not json", b"{", b"", b"\xff\xfe"])
    def test_malformed_body(self, client, body):
        r = client.post("/api/create", content=body, headers={"content-type": "application/json"})
        assert r.status_code == 400
        assert r.json() == {"error": "Bad Request"}

    @pytest.mark.parametrize(
        "body",
        [b'{"text": "\\ud800"}', b'{"text": "ok", "id": "a\\udfffb"}'],
    )
    def test_unencodable_strings(self, client, memory_store, body):
        r = client.post("/api/create", content=body, headers={"content-type": "application/json"})
        assert r.status_code == 400
        assert r.json() == {"error": "Bad Request"}
        assert memory_store.redis.store == {}

    def test_allocation_exhausted(self, client):
        with patch("zanile.notes.allocate_unique_id", side_effect=AllocationExhausted()):
            r = create(client, text="hello")
        assert r.status_code == 500
        assert r.json() == {"error": "Could not generate unique id"}

    def test_store_failure(self, make_client, settings):
        redis_client = MagicMock()
        redis_client.get.side_effect = ConnectionError("down")
        client = make_client(settings, NoteStore(redis_client))
        r = create(client, text="hello", id="abc")
        assert r.status_code == 500
        assert r.json() == {"error": "Internal Server Error"}

    def test_ttl_applied(self, make_client, memory_store, monkeypatch):
        client = make_client(Settings(default_ttl_seconds=60, app_domain=""), memory_store)
        monkeypatch.setattr(memory_store.redis, "_now", lambda: 1000.0)
        note_id = create(client, text="hello").json()["id"]
        assert client.get(f"/raw/{note_id}").status_code == 200

        monkeypatch.setattr(memory_store.redis, "_now", lambda: 1060.0)
        assert client.get(f"/raw/{note_id}").status_code == 404
        assert client.get(f"/{note_id}").status_code == 404

    def test_app_domain(self, make_client, memory_store):
        client = make_client(Settings(app_domain="https://clip.example"), memory_store)
        r = create(client, text="hello", id="abc")
        assert r.json()["url"] == "https://clip.example/abc"


class TestRead:
    def test_view(self, client):
        note_id = create(client, text="<script>&\"'").json()["id"]
        r = client.get(f"/{note_id}")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert "&lt;script&gt;&amp;&quot;&#39;" in r.text
        assert "<script>&" not in r.text
        assert f"http://testserver/raw/{note_id}" in r.text

    def test_raw_is_byte_exact(self, client):
        text = "  tabs\tand ünïcode 🎉\r\n<b>bold</b>\n"
        note_id = create(client, text=text).json()["id"]
        r = client.get(f"/raw/{note_id}")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/plain")
        assert r.content == text.encode("utf-8")

    def test_no_normalization_on_read(self, client):
        create(client, text="hello", id="my-note")
        assert client.get("/my-note").status_code == 200
        assert client.get("/My-Note").status_code == 404

    @pytest.mark.parametrize("path", ["/abcdefghijklmnop", "/raw/abcdefghijklmnop"])
    def test_unknown_note(self, client, path):
        r = client.get(path)
        assert r.status_code == 404
        assert r.text == "Not found"
        assert r.headers["content-type"].startswith("text/plain")


class TestUnmatched:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/a/b"),
            ("GET", "/raw/"),
            ("GET", "/api/create"),
            ("POST", "/"),
            ("POST", "/some-note"),
            ("DELETE", "/some-note"),
            ("PUT", "/api/create"),
        ],
    )
    def test_not_found(self, client, method, path):
        r = client.request(method, path)
        assert r.status_code == 404
        assert r.text == "Not found"

    @pytest.mark.parametrize("path", ["/abc/", "/raw/abc/", "/about/"])
    def test_trailing_slash_is_not_redirected(self, client, path):
        assert create(client, text="hello", id="abc").status_code == 201
        r = client.get(path, follow_redirects=False)
        assert r.status_code == 404
        assert r.text == "Not found"

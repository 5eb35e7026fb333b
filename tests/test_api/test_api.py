"""Tests for the HTTP API."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from kanjicompose.engine.catalog import get_entry
from kanjicompose.engine.registry import Layout
from kanjicompose.main import create_app
from tests.conftest import GLYPHS, HAYASHI_KAGE, KI_KAGE, AnyGlyphFetcher


@pytest.fixture
def fetcher() -> AnyGlyphFetcher:
    return AnyGlyphFetcher(GLYPHS)


@pytest.fixture
def client(fetcher) -> TestClient:
    return TestClient(create_app(fetch=fetcher, seed=7))


BASE = {"data": "", "logicalSize": 200, "area": 40000}


class TestMeta:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
        assert resp.json()["layouts_registered"] == 8

    def test_catalog(self, client):
        entries = client.get("/api/catalog").json()
        assert len(entries) == 17
        fire = next(e for e in entries if e["char"] == "火")
        assert fire["layouts"] == ["ADD_LEFT", "ADD_BOTTOM"]
        assert fire["variants"]["ADD_BOTTOM"] == {"id": "u706c-04", "rect": [0, 0.6, 1, 0.4]}

    def test_layouts(self, client):
        layouts = client.get("/api/layouts").json()
        assert [item["id"] for item in layouts] == [layout.value for layout in Layout]
        assert [item["id"] for item in layouts if item["terminal"]] == ["TRIANGLE"]
        assert all(item["description"] for item in layouts)

    def test_shutdown_closes_glyphwiki_client(self):
        app = create_app()
        http = app.state.glyphwiki.client
        with TestClient(app):
            pass
        assert http.is_closed


class TestGlyphs:
    def test_load_by_char(self, client):
        body = client.get("/api/glyphs/木").json()
        assert body["id"] == "u6728"
        assert body["data"] == KI_KAGE

    def test_load_pulls_parts(self, client, fetcher):
        body = client.get("/api/glyphs/林").json()
        assert body["data"] == HAYASHI_KAGE
        assert body["cached_parts"] == 3
        assert sorted(fetcher.calls) == ["u6728", "u6728-01", "u6797"]

    def test_multi_character_name(self, client, fetcher):
        body = client.get("/api/glyphs/林木").json()
        assert body["id"] == "u6797"
        assert body["data"] == HAYASHI_KAGE
        assert "林木" not in fetcher.calls

    def test_unavailable(self, client, fetcher):
        fetcher.fail.add("u72ac")
        assert client.get("/api/glyphs/犬").status_code == 404


class TestCompose:
    def test_compose(self, client):
        resp = client.post("/api/compose", json={**BASE, "char": "木", "layout": "ADD_LEFT"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["logicalSize"] == 320
        assert body["area"] == pytest.approx(64000)
        assert body["visualSize"] == pytest.approx(64000 ** 0.5)
        assert body["scaleFactor"] == pytest.approx(64000 ** 0.5 / 320)
        assert body["info"] == {"char": "木", "layout": "ADD_LEFT"}
        assert len(body["data"].split("$")) == 2

    def test_area_factor(self, client):
        resp = client.post("/api/compose", json={**BASE, "char": "口", "layout": "ADD_RIGHT", "areaFactor": 0})
        assert resp.json()["area"] == 40000

    def test_unknown_char(self, client):
        resp = client.post("/api/compose", json={**BASE, "char": "犬", "layout": "ADD_LEFT"})
        assert resp.status_code == 404

    def test_disallowed_layout(self, client):
        resp = client.post("/api/compose", json={**BASE, "char": "辶", "layout": "ADD_LEFT"})
        assert resp.status_code == 400

    def test_unknown_layout(self, client):
        resp = client.post("/api/compose", json={**BASE, "char": "木", "layout": "DIAGONAL"})
        assert resp.status_code == 422

    def test_non_positive_size(self, client):
        resp = client.post("/api/compose", json={**BASE, "logicalSize": 0, "char": "木", "layout": "ADD_TOP"})
        assert resp.status_code == 422

    def test_malformed_data(self, client):
        resp = client.post("/api/compose", json={**BASE, "data": "1:0:0:x:y:1:1", "char": "木", "layout": "ADD_TOP"})
        assert resp.status_code == 422

    def test_part_unavailable(self, client, fetcher):
        fetcher.fail.add("u53e3")
        resp = client.post("/api/compose", json={**BASE, "char": "口", "layout": "ADD_TOP"})
        assert resp.status_code == 502

    def test_random(self, client):
        body = client.post("/api/compose/random", json=BASE).json()
        info = body["info"]
        assert Layout(info["layout"]) in get_entry(info["char"]).layouts
        assert body["logicalSize"] > 200

    def test_random_is_seeded(self, fetcher):
        first = TestClient(create_app(fetch=fetcher, seed=3)).post("/api/compose/random", json=BASE).json()
        second = TestClient(create_app(fetch=fetcher, seed=3)).post("/api/compose/random", json=BASE).json()
        assert first == second


class TestState:
    def test_initial(self, client):
        body = client.get("/api/state").json()
        assert body == {"data": "", "logicalSize": 200, "area": 40000, "historyDepth": 0, "info": None}

    def test_random_then_undo(self, client):
        added = client.post("/api/state/random", json={}).json()
        assert added["historyDepth"] == 1
        assert added["info"] is not None

        undo = client.post("/api/state/undo").json()
        assert undo["undone"] is True
        assert undo["state"]["historyDepth"] == 0
        assert undo["state"]["logicalSize"] == 200

        again = client.post("/api/state/undo").json()
        assert again["undone"] is False

    def test_successive_random_grows_history(self, client):
        for _ in range(3):
            client.post("/api/state/random", json={"areaFactor": 0.5})
        assert client.get("/api/state").json()["historyDepth"] == 3

    def test_reset(self, client):
        client.post("/api/state/random", json={})
        body = client.post("/api/state/reset", json={"data": "1:0:0:10:10:50:50"}).json()
        assert body["data"] == "1:0:0:10:10:50:50"
        assert body["historyDepth"] == 0

    def test_reset_from_glyph(self, client):
        body = client.post("/api/state/reset/glyph", json={"name": "林"}).json()
        assert body["data"] == HAYASHI_KAGE
        assert body["logicalSize"] == 200

    def test_reset_from_unavailable_glyph(self, client, fetcher):
        fetcher.fail.add("u72ac")
        resp = client.post("/api/state/reset/glyph", json={"name": "犬"})
        assert resp.status_code == 502
        assert client.get("/api/state").json()["data"] == ""

    def test_export_import(self, client):
        client.post("/api/state/random", json={})
        exported = client.get("/api/state/export")
        assert exported.headers["content-type"].startswith("application/json")
        snapshot = exported.json()
        assert set(snapshot) == {"data", "logicalSize", "area"}

        client.post("/api/state/reset", json={"data": ""})
        body = client.post("/api/state/import", content=exported.content).json()
        assert body["data"] == snapshot["data"]
        assert body["logicalSize"] == snapshot["logicalSize"]
        assert body["historyDepth"] == 0

    def test_invalid_import(self, client):
        client.post("/api/state/reset", json={"data": "keep"})
        resp = client.post("/api/state/import", content=json.dumps({"data": "x"}))
        assert resp.status_code == 422
        assert client.get("/api/state").json()["data"] == "keep"

    def test_non_utf8_import(self, client):
        resp = client.post("/api/state/import", content=b"\xff\xfe\x00")
        assert resp.status_code == 422

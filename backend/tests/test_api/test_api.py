"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from svg_wkt import __version__
from svg_wkt.main import app
from tests.conftest import NAMED_SVG, SHAPES_SVG, TEXT_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_convert_shapes():
    response = client.post("/api/convert", json={"svg": SHAPES_SVG})
    assert response.status_code == 200
    data = response.json()
    assert data["detail"].startswith("GEOMETRYCOLLECTION(POLYGON((0 0,10 0,10 -10,0 0))")
    assert data["spaces"] == []
    assert data["strings"] == []


def test_convert_named_spaces_omit_missing_title():
    response = client.post("/api/convert", json={"svg": NAMED_SVG})
    data = response.json()
    assert data["spaces"][0] == {"id": "floor", "title": "Ground floor", "space": "EMPTY"}
    assert "title" not in data["spaces"][2]


def test_convert_text_uses_camel_case_fields():
    data = client.post("/api/convert", json={"svg": TEXT_SVG}).json()
    assert data["strings"][0]["fontSize"] == "10"
    assert data["strings"][0]["fontFamily"] == "Arial"


def test_convert_with_precision():
    svg = '<svg><circle cx="0" cy="0" r="0.33333"/></svg>'
    data = client.post("/api/convert", json={"svg": svg, "precision": 1}).json()
    assert data["detail"] == "GEOMETRYCOLLECTION(CIRCULARSTRING(0.3 0,0 -0.3,-0.3 0,0 0.3,0.3 0))"


def test_convert_empty_svg():
    response = client.post("/api/convert", json={"svg": "   "})
    assert response.status_code == 400
    assert response.json()["detail"] == "Empty XML."


def test_convert_invalid_svg():
    response = client.post("/api/convert", json={"svg": "<not-svg>"})
    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid XML")


def test_convert_degrades_bad_path_data_per_element():
    svg = (
        "<svg>"
        '<path d="M0 0 L10 0 L10 10 L0 10 Z L20 20 L30 20 L30 30 Z"/>'
        '<path d="M0 0 L10 0 L10"/>'
        '<line x1="0" y1="0" x2="10" y2="10"/>'
        "</svg>"
    )
    response = client.post("/api/convert", json={"svg": svg})
    assert response.status_code == 200
    assert response.json()["detail"] == (
        "GEOMETRYCOLLECTION(LINESTRING(0 0,10 -10),LINESTRING EMPTY,LINESTRING(0 0,10 0))"
    )


def test_convert_rejects_bad_config():
    assert client.post("/api/convert", json={"svg": SHAPES_SVG, "precision": -1}).status_code == 422
    assert client.post("/api/convert", json={"svg": SHAPES_SVG, "density": 0}).status_code == 422

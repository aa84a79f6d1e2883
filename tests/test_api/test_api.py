"""Tests for API endpoints."""

from __future__ import annotations

import sys
import types

from fastapi.testclient import TestClient

from qrsvg import __version__
from qrsvg.main import app
from tests.conftest import LOGO_HREF, OVERSIZED_VALUE


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_render_defaults():
    response = client.post("/api/render", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["module_count"] == 25  # version 2 at level M
    assert data["cell_size"] == 4
    assert data["path"].startswith("M0 ")
    assert data["segment_count"] > 0
    assert data["error"] is None
    assert data["layout"]["canvas_size"] == 100
    assert "<svg" in data["svg"]


def test_render_layout_with_padding_and_logo():
    response = client.post("/api/render", json={
        "value": "hello",
        "size": 100,
        "padding": 10,
        "logo": LOGO_HREF,
        "logo_size": 20,
        "logo_margin": 2,
    })
    assert response.status_code == 200
    layout = response.json()["layout"]
    assert layout["canvas_size"] == 110
    assert layout["path_origin"] == [5, 5]
    assert layout["logo_wrapper_size"] == 24
    assert layout["logo_position"] == [43, 43]
    assert LOGO_HREF in response.json()["svg"]


def test_render_over_capacity_fails():
    response = client.post("/api/render", json={"value": OVERSIZED_VALUE, "ecl": "H"})
    assert response.status_code == 422
    assert "detail" in response.json()


def test_render_over_capacity_with_fallback():
    response = client.post("/api/render", json={
        "value": OVERSIZED_VALUE,
        "ecl": "H",
        "fallback_on_error": True,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["path"] == ""
    assert data["module_count"] == 0
    assert data["error"]
    assert "<path" not in data["svg"]


def test_render_rejects_bad_input():
    assert client.post("/api/render", json={"ecl": "Z"}).status_code == 422
    assert client.post("/api/render", json={"size": 0}).status_code == 422
    assert client.post("/api/render", json={"padding": -1}).status_code == 422


def test_render_svg_media_type():
    response = client.post("/api/render.svg", json={"value": "hello"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.endswith("</svg>")


def test_render_png(monkeypatch):
    def svg2png(bytestring, output_width, output_height):
        return b"\x89PNG" + bytes([output_width % 256])

    monkeypatch.setitem(sys.modules, "cairosvg", types.SimpleNamespace(svg2png=svg2png))
    response = client.post("/api/render.png", json={"value": "hello", "size": 50})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_preview():
    response = client.post("/api/preview", json={"value": "hello", "style": "text"})
    assert response.status_code == 200
    data = response.json()
    assert data["module_count"] == 21
    assert data["matches_matrix"] is True
    lines = data["preview"].split("\n")
    assert len(lines) == 21
    assert lines[0].startswith("X X X X X X X .")


def test_preview_over_capacity():
    response = client.post("/api/preview", json={"value": OVERSIZED_VALUE, "ecl": "H"})
    assert response.status_code == 422

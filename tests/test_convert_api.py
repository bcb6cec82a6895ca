import sys
from pathlib import Path

# Keep imports predictable in local runs
sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest
from fastapi.testclient import TestClient

from core.config import settings
from main import app
from modules.coord_transform import gcj02_to_bd09, wgs84_to_gcj02, wgs84_to_web_mercator

API_KEY = settings.api_keys[0]


def _sample_wgs84_polygon():
    lat = 31.2304
    lon = 121.4737
    d = 0.01
    return [
        [lon - d, lat - d],
        [lon + d, lat - d],
        [lon + d, lat + d],
        [lon - d, lat + d],
        [lon - d, lat - d],
    ]


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_list_systems(client):
    resp = client.get("/api/v1/convert/systems")
    assert resp.status_code == 200
    assert resp.json()["systems"] == ["wgs84", "gcj02", "bd09", "webmercator"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_convert_point(client):
    resp = client.post(
        "/api/v1/convert/point",
        json={"lng": 114.397433, "lat": 22.909235, "source": "wgs84", "target": "gcj02"},
    )
    assert resp.status_code == 200
    data = resp.json()
    lng, lat = wgs84_to_gcj02(114.397433, 22.909235)
    assert data["lng"] == pytest.approx(lng, abs=1e-12)
    assert data["lat"] == pytest.approx(lat, abs=1e-12)
    assert data["source"] == "wgs84"
    assert data["target"] == "gcj02"


def test_convert_point_defaults_to_wgs84_gcj02_and_rejects_unknown_system(client):
    resp = client.post("/api/v1/convert/point", json={"lng": 121.4737, "lat": 31.2304})
    assert resp.status_code == 200
    assert resp.json()["target"] == "gcj02"

    resp = client.post(
        "/api/v1/convert/point",
        json={"lng": 1, "lat": 2, "source": "wgs84", "target": "utm"},
    )
    assert resp.status_code == 422


def test_convert_points_batch(client):
    polygon = _sample_wgs84_polygon()
    resp = client.post(
        "/api/v1/convert/points",
        json={"points": polygon, "source": "wgs84", "target": "webmercator"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == len(polygon)
    assert [tuple(p) for p in data["points"]] == [wgs84_to_web_mercator(a, b) for a, b in polygon]


def test_convert_points_rejects_short_points(client):
    resp = client.post("/api/v1/convert/points", json={"points": [[121.0]]})
    assert resp.status_code == 422


def test_convert_points_batch_limit(client, monkeypatch):
    monkeypatch.setattr(settings, "max_batch_points", 2)
    resp = client.post("/api/v1/convert/points", json={"points": _sample_wgs84_polygon()})
    assert resp.status_code == 413
    body = resp.json()
    assert body["status"] == "error"
    assert body["detail"] == {"count": 5, "limit": 2}


def test_convert_bbox(client):
    bbox = {"north": 31.3, "east": 121.6, "south": 31.1, "west": 121.3}
    resp = client.post(
        "/api/v1/convert/bbox",
        json={"bbox": bbox, "source": "gcj02", "target": "bd09"},
    )
    assert resp.status_code == 200
    out = resp.json()["bbox"]
    assert (out["west"], out["south"]) == pytest.approx(gcj02_to_bd09(121.3, 31.1), abs=1e-12)
    assert (out["east"], out["north"]) == pytest.approx(gcj02_to_bd09(121.6, 31.3), abs=1e-12)


def test_convert_geojson_requires_api_key(client):
    payload = {
        "data": {"type": "Polygon", "coordinates": [_sample_wgs84_polygon()]},
        "source": "wgs84",
        "target": "gcj02",
    }
    assert client.post("/api/v1/convert/geojson", json=payload).status_code == 401
    bad = client.post("/api/v1/convert/geojson", json=payload, headers={"Authorization": "Bearer wrong"})
    assert bad.status_code == 401

    resp = client.post("/api/v1/convert/geojson", json=payload, headers={"Authorization": f"Bearer {API_KEY}"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["type"] == "Polygon"
    first = data["coordinates"][0][0]
    assert tuple(first) == pytest.approx(wgs84_to_gcj02(*_sample_wgs84_polygon()[0]), abs=1e-12)


def test_convert_geojson_invalid_payload_returns_biz_error(client):
    resp = client.post(
        "/api/v1/convert/geojson",
        json={"data": {"type": "Circle"}},
        headers={"Authorization": API_KEY},
    )
    assert resp.status_code == 422
    assert resp.json()["status"] == "error"

# tests/test_static.py
import pytest
from fastapi.testclient import TestClient

from completion_api.api.main import create_app


@pytest.mark.parametrize(
    "path, content_type",
    [
        ("/static/index.html", "text/html"),
        ("/static/logo.svg", "image/svg+xml"),
        ("/static/hero.svg", "image/svg+xml"),
        ("/logo.svg", "image/svg+xml"),
        ("/hero.svg", "image/svg+xml"),
    ],
)
def test_static_assets_are_served(client, path, content_type):
    response = client.get(path)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(content_type)


def test_root_serves_landing_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/completion" in response.text
    assert "/static/logo.svg" in response.text


def test_unknown_asset_is_not_found(client):
    assert client.get("/static/missing.png").status_code == 404


def test_static_dir_can_be_overridden(test_settings, fake_completer, tmp_path):
    (tmp_path / "index.html").write_text("<h1>custom landing</h1>", encoding="utf-8")
    test_settings.static_dir = str(tmp_path)

    with TestClient(create_app(test_settings, completer=fake_completer)) as test_client:
        response = test_client.get("/")

    assert response.status_code == 200
    assert "custom landing" in response.text

import pytest
from fastapi.testclient import TestClient
from app.main import create_app

@pytest.fixture
def dist_dir(tmp_path):
    (tmp_path / "index.html").write_text("<html>booking client</html>", encoding="utf-8")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "app.js").write_text("console.log('app')", encoding="utf-8")
    return tmp_path

def test_serves_existing_files(dist_dir):
    app = create_app(environment="production", client_dist_dir=str(dist_dir))

    with TestClient(app) as client:
        response = client.get("/assets/app.js")

    assert response.status_code == 200
    assert response.text == "console.log('app')"

def test_unknown_paths_fall_back_to_index(dist_dir):
    app = create_app(environment="production", client_dist_dir=str(dist_dir))

    with TestClient(app) as client:
        root = client.get("/")
        deep = client.get("/bookings/new")

    assert root.status_code == 200
    assert "booking client" in root.text
    assert deep.status_code == 200
    assert "booking client" in deep.text

def test_api_routes_take_precedence(dist_dir):
    app = create_app(environment="production", client_dist_dir=str(dist_dir))

    with TestClient(app) as client:
        response = client.get("/api/bookings")
        health = client.get("/health")

    assert response.json() == []
    assert health.json()["environment"] == "production"

def test_missing_build_directory_fails_startup(tmp_path):
    missing = tmp_path / "nope"

    with pytest.raises(FileNotFoundError, match="Could not find the build directory"):
        create_app(environment="production", client_dist_dir=str(missing))

def test_development_does_not_serve_client(tmp_path):
    # Directory doesn't even exist, development must not care
    app = create_app(environment="development", client_dist_dir=str(tmp_path / "nope"))

    with TestClient(app) as client:
        response = client.get("/bookings/new")

    assert response.status_code == 404

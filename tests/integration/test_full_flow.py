from fastapi.testclient import TestClient
from apps.network.main import app

client = TestClient(app)


def test_full_flow():
    response = client.put(
        "/endpoints/api",
        json={"scheme": "https", "host": "api.example.com", "path": "/v1"},
    )
    assert response.status_code == 204

    response = client.get("/endpoints/api")
    assert response.status_code == 200
    assert response.json()["host"] == "api.example.com"

    response = client.post(
        "/requests", json={"url": "https://api.example.com/v1/users", "key": "api"}
    )
    assert response.status_code == 200
    assert response.json() == {"url": "https://api.example.com/v1/users", "headers": {}}


def test_unknown_code_is_404():
    response = client.post("/requests", json={"url": "https://example.com", "key": "missingCode"})
    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "not_found"
    assert client.get("/endpoints/missingCode").status_code == 404


def test_invalid_descriptor_is_422():
    response = client.put("/endpoints/api", json={"host": "example.com", "port": -1})
    assert response.status_code == 422


def test_request_composed_from_stored_endpoint():
    client.put("/endpoints/web", json={"scheme": "https", "host": "web.example.com", "path": "/home"})
    response = client.post("/requests", json={"key": "web"})
    assert response.status_code == 200
    assert response.json()["url"] == "https://web.example.com/home"


def test_endpoint_without_scheme_is_400():
    client.put("/endpoints/broken", json={"host": "example.com", "path": "/x"})
    response = client.post("/requests", json={"key": "broken"})
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "invalid_url"

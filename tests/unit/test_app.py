from fastapi import FastAPI, Request
from starlette.testclient import TestClient

from employee_portal.core.middleware import RequestSizeLimitMiddleware


def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Employee Portal API"


def test_unconfigured_document_store_yields_500(client):
    response = client.get("/api/getAllEmployees")
    assert response.status_code == 500
    assert response.json()["detail"] == "Error retrieving employees"


def test_unconfigured_auth_provider_rejects_login(client):
    response = client.post("/api/login", json={"email": "a@x.com", "password": "secret123"})
    assert response.status_code == 401
    assert response.json()["detail"]["code"] == "not_configured"


def test_cors_allows_any_origin(client):
    response = client.options(
        "/api/getAllEmployees",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "http://localhost:5173")


def test_request_size_limit_ignores_bodies_without_content_length():
    app = FastAPI()
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=10)

    @app.post("/echo")
    async def echo(request: Request):
        return {"size": len(await request.body())}

    def chunks():
        yield b"x" * 50
        yield b"y" * 50

    c = TestClient(app)
    response = c.post("/echo", content=chunks())
    assert response.status_code == 200
    assert response.json() == {"size": 100}


def test_request_size_limit_blocks_large_payload():
    app = FastAPI()
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=10)

    @app.post("/echo")
    def echo(body: dict):
        return body

    c = TestClient(app)
    assert c.post("/echo", json={"x": "y"}).status_code == 200
    r2 = c.post("/echo", json={"big": "x" * 100})
    assert r2.status_code == 413

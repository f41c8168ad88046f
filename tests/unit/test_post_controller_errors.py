from httpx import ASGITransport, AsyncClient
import pytest

from api.middleware.cors import CORS_HEADERS
from core.exceptions import EXC_TO_STATUS, FatalProvisioningError, NotFoundError, PersistenceError, ValidationError, map_exception_to_status

PREFIXES = ["/api/posts", "/posts"]


@pytest.mark.unit
@pytest.mark.parametrize("prefix", PREFIXES)
async def test_list_posts_persistence_error(unit_client: AsyncClient, monkeypatch, prefix):
    async def mock_list_posts(*args, **kwargs):
        raise PersistenceError("relation \"posts\" does not exist")

    monkeypatch.setattr("services.post_service.list_posts", mock_list_posts)

    response = await unit_client.get(prefix)

    assert response.status_code == 500
    assert response.json() == {"error": 'relation "posts" does not exist'}


@pytest.mark.unit
@pytest.mark.parametrize("prefix", PREFIXES)
async def test_create_post_persistence_error(unit_client: AsyncClient, monkeypatch, prefix):
    async def mock_create_post(*args, **kwargs):
        raise PersistenceError("connection refused")

    monkeypatch.setattr("services.post_service.create_post", mock_create_post)

    response = await unit_client.post(prefix, json={"title": "t", "content": "c"})

    assert response.status_code == 500
    assert response.json() == {"error": "connection refused"}


@pytest.mark.unit
@pytest.mark.parametrize("prefix", PREFIXES)
async def test_delete_post_not_found(unit_client: AsyncClient, monkeypatch, prefix):
    async def mock_delete_post(*args, **kwargs):
        raise NotFoundError("Post not found")

    monkeypatch.setattr("services.post_service.delete_post", mock_delete_post)

    response = await unit_client.delete(f"{prefix}/1")

    assert response.status_code == 404
    assert response.json() == {"error": "Post not found"}


@pytest.mark.unit
@pytest.mark.parametrize("prefix", PREFIXES)
async def test_create_post_malformed_json(unit_client: AsyncClient, prefix):
    response = await unit_client.post(
        prefix,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid request body")


@pytest.mark.unit
async def test_create_post_body_not_an_object(unit_client: AsyncClient):
    response = await unit_client.post("/api/posts", json=["title", "content"])

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid request body")


@pytest.mark.unit
async def test_create_post_without_body(unit_client: AsyncClient):
    response = await unit_client.post("/api/posts")

    assert response.status_code == 400
    assert response.json() == {"error": "The title and content fields are mandatory."}


@pytest.mark.unit
def test_status_mapping():
    assert map_exception_to_status(ValidationError("x")) == 400
    assert map_exception_to_status(NotFoundError("x")) == 404
    assert map_exception_to_status(PersistenceError("x")) == 500
    assert FatalProvisioningError not in EXC_TO_STATUS
    assert ValidationError("x").code == "validation_error"


@pytest.mark.unit
async def test_unhandled_error_keeps_cors_headers(app, monkeypatch):
    async def mock_list_posts(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("services.post_service.list_posts", mock_list_posts)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        response = await ac.get("/api/posts")

    assert response.status_code == 500
    assert response.json() == {"error": "boom"}
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value

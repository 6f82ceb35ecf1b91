from __future__ import annotations

from typing import Any

import pytest
from starlette.testclient import TestClient

from employee_portal.core.dependencies import get_auth_provider, get_blob_store, get_document_store
from employee_portal.core.result import Err, Ok, Result
from employee_portal.main import app
from employee_portal.models.auth import AuthUser

BLOB_BASE_URL = "https://photos.example.com"

SAMPLE_EMPLOYEE: dict[str, str] = {
    "firstName": "Ann",
    "lastName": "Lee",
    "idNumber": "I1",
    "eMailAddress": "a@x.com",
    "phoneNumber": "555",
    "position": "Clerk",
}


class FakeDocumentStore:
    """In-memory stand-in for the Cosmos DB container."""

    def __init__(self) -> None:
        self.initialized = True
        self.docs: dict[str, dict[str, Any]] = {}
        self.failure: Err | None = None
        self._next_id = 0

    async def list_documents(self) -> Result[list[dict[str, Any]]]:
        if self.failure:
            return self.failure
        return Ok([{"id": doc_id, **doc} for doc_id, doc in self.docs.items()])

    async def get_document(self, doc_id: str) -> Result[dict[str, Any] | None]:
        if self.failure:
            return self.failure
        doc = self.docs.get(doc_id)
        return Ok({"id": doc_id, **doc} if doc is not None else None)

    async def add_document(self, data: dict[str, Any]) -> Result[str]:
        if self.failure:
            return self.failure
        self._next_id += 1
        doc_id = f"emp{self._next_id}"
        self.docs[doc_id] = dict(data)
        return Ok(doc_id)

    async def update_document(self, doc_id: str, fields: dict[str, Any]) -> Result[None]:
        if self.failure:
            return self.failure
        self.docs[doc_id].update(fields)
        return Ok(None)

    async def delete_document(self, doc_id: str) -> Result[None]:
        if self.failure:
            return self.failure
        del self.docs[doc_id]
        return Ok(None)

    async def check_connection(self) -> bool:
        return self.failure is None


class FakeBlobStore:
    def __init__(self) -> None:
        self.initialized = True
        self.objects: dict[str, bytes] = {}
        self.failure: Err | None = None

    def public_url(self, key: str) -> str:
        return f"{BLOB_BASE_URL}/{key}"

    async def upload(self, key: str, data: bytes, content_type: str | None = None) -> Result[str]:
        if self.failure:
            return self.failure
        self.objects[key] = data
        return Ok(self.public_url(key))

    async def check_connection(self) -> bool:
        return self.failure is None


class FakeAuthProvider:
    def __init__(self) -> None:
        self.initialized = True
        self.users: dict[str, tuple[str, AuthUser]] = {}
        self.reset_requests: list[str] = []

    async def create_user(self, email: str, password: str) -> Result[AuthUser]:
        if email in self.users:
            return Err("auth/email-already-in-use", "Firebase: Error (auth/email-already-in-use).")
        if len(password) < 6:
            return Err("auth/weak-password", "Firebase: Error (auth/weak-password).")
        user = AuthUser(uid=f"uid-{len(self.users) + 1}", email=email)
        self.users[email] = (password, user)
        return Ok(user)

    async def sign_in(self, email: str, password: str) -> Result[AuthUser]:
        stored = self.users.get(email)
        if stored is None or stored[0] != password:
            return Err("auth/invalid-credential", "Firebase: Error (auth/invalid-credential).")
        return Ok(stored[1])

    async def send_password_reset_email(self, email: str) -> Result[None]:
        if email not in self.users:
            return Err("auth/user-not-found", "Firebase: Error (auth/user-not-found).")
        self.reset_requests.append(email)
        return Ok(None)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def documents() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def blobs() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def auth_provider() -> FakeAuthProvider:
    return FakeAuthProvider()


@pytest.fixture
def api_client(documents, blobs, auth_provider):
    app.dependency_overrides[get_document_store] = lambda: documents
    app.dependency_overrides[get_blob_store] = lambda: blobs
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

from __future__ import annotations

from fastapi import Depends, Request

from employee_portal.core.config import settings
from employee_portal.services.auth_provider import AuthProvider
from employee_portal.services.blob_store import BlobStore
from employee_portal.services.document_store import DocumentStore
from employee_portal.services.employee_service import EmployeeService


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def get_blob_store(request: Request) -> BlobStore:
    return request.app.state.blob_store


def get_auth_provider(request: Request) -> AuthProvider:
    return request.app.state.auth_provider


def get_employee_service(
    documents: DocumentStore = Depends(get_document_store),  # noqa: B008
    blobs: BlobStore = Depends(get_blob_store),  # noqa: B008
) -> EmployeeService:
    return EmployeeService(documents, blobs, image_prefix=settings.STORAGE_IMAGE_PREFIX)

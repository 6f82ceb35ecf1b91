"""Employee records backed by the document store, photos by the blob store."""

from __future__ import annotations

import logging
import time
from typing import Any

from employee_portal.core.result import Err, Ok, Result
from employee_portal.models.employee import Employee, EmployeeCreate, EmployeeUpdate, UploadedImage
from employee_portal.services.blob_store import BlobStore
from employee_portal.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


def image_key(filename: str, prefix: str = "images") -> str:
    # Two uploads of the same filename within one millisecond share a key.
    return f"{prefix}/{int(time.time() * 1000)}-{filename}"


class EmployeeService:
    def __init__(self, documents: DocumentStore, blobs: BlobStore, image_prefix: str = "images") -> None:
        self.documents = documents
        self.blobs = blobs
        self.image_prefix = image_prefix

    async def _upload_image(self, image: UploadedImage) -> Result[str]:
        key = image_key(image.filename, self.image_prefix)
        return await self.blobs.upload(key, image.content, image.content_type)

    async def list_employees(self) -> Result[list[Employee]]:
        result = await self.documents.list_documents()
        if isinstance(result, Err):
            return result
        return Ok([Employee(**doc) for doc in result.value])

    async def get_employee(self, employee_id: str) -> Result[Employee | None]:
        result = await self.documents.get_document(employee_id)
        if isinstance(result, Err):
            return result
        if result.value is None:
            return Ok(None)
        return Ok(Employee(**result.value))

    async def add_employee(self, data: EmployeeCreate, image: UploadedImage) -> Result[str]:
        uploaded = await self._upload_image(image)
        if isinstance(uploaded, Err):
            return uploaded

        document: dict[str, Any] = {**data.model_dump(), "image": uploaded.value}
        created = await self.documents.add_document(document)
        if isinstance(created, Err):
            return created

        logger.info("Employee %s created", created.value)
        return created

    async def update_employee(
        self,
        employee_id: str,
        data: EmployeeUpdate,
        image: UploadedImage | None = None,
    ) -> Result[Employee | None]:
        """Overwrite the updatable fields; ``Ok(None)`` when the employee does not exist."""
        existing = await self.documents.get_document(employee_id)
        if isinstance(existing, Err):
            return existing
        if existing.value is None:
            return Ok(None)

        updates: dict[str, Any] = data.model_dump()
        if image is not None:
            uploaded = await self._upload_image(image)
            if isinstance(uploaded, Err):
                return uploaded
            updates["image"] = uploaded.value

        patched = await self.documents.update_document(employee_id, updates)
        if isinstance(patched, Err):
            return patched

        return Ok(Employee(id=employee_id, **updates))

    async def delete_employee(self, employee_id: str) -> Result[bool]:
        """Remove the document; ``Ok(False)`` when the employee does not exist.

        The photo stays in the blob store.
        """
        existing = await self.documents.get_document(employee_id)
        if isinstance(existing, Err):
            return existing
        if existing.value is None:
            return Ok(False)

        deleted = await self.documents.delete_document(employee_id)
        if isinstance(deleted, Err):
            return deleted
        return Ok(True)

"""Cosmos DB document store for the employees container."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from azure.core.exceptions import AzureError
from azure.cosmos.aio import CosmosClient
from azure.cosmos.exceptions import CosmosHttpResponseError, CosmosResourceNotFoundError

from employee_portal.core.config import Settings
from employee_portal.core.result import Err, Ok, Result, not_configured

logger = logging.getLogger(__name__)

# Cosmos DB system properties stripped from every document we hand out
_SYSTEM_KEYS = frozenset({"_rid", "_self", "_etag", "_attachments", "_ts"})


def _to_err(error: AzureError) -> Err:
    if isinstance(error, CosmosHttpResponseError):
        return Err(code=str(error.status_code), message=error.message or str(error))
    return Err(code="unavailable", message=str(error))


def _clean(raw: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in raw.items() if k not in _SYSTEM_KEYS}


class DocumentStore:
    def __init__(self) -> None:
        self.client: CosmosClient | None = None
        self.container: Any = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        endpoint = settings.COSMOS_DB_ENDPOINT
        key = settings.COSMOS_DB_KEY
        database_name = settings.COSMOS_DB_DATABASE
        container_name = settings.COSMOS_DB_EMPLOYEES_CONTAINER

        if not endpoint or not key:
            logger.warning("Cosmos DB credentials missing, document store not initialized")
            return

        self.client = CosmosClient(endpoint, key)
        db = self.client.get_database_client(database_name)
        self.container = db.get_container_client(container_name)
        self.initialized = True
        logger.info("DocumentStore initialized (container=%s)", container_name)

    async def close(self) -> None:
        if self.client:
            await self.client.close()
            self.client = None
            self.container = None
            self.initialized = False

    async def list_documents(self) -> Result[list[dict[str, Any]]]:
        if not self.container:
            return not_configured("DocumentStore")

        try:
            items: list[dict[str, Any]] = []
            async for item in self.container.read_all_items():
                items.append(_clean(item))
        except AzureError as e:
            return _to_err(e)
        return Ok(items)

    async def get_document(self, doc_id: str) -> Result[dict[str, Any] | None]:
        """Fetch one document; a missing id is a successful ``None``."""
        if not self.container:
            return not_configured("DocumentStore")

        try:
            item = await self.container.read_item(item=doc_id, partition_key=doc_id)
        except CosmosResourceNotFoundError:
            return Ok(None)
        except AzureError as e:
            return _to_err(e)
        return Ok(_clean(item))

    async def add_document(self, data: dict[str, Any]) -> Result[str]:
        if not self.container:
            return not_configured("DocumentStore")

        doc_id = uuid.uuid4().hex
        try:
            await self.container.create_item(body={"id": doc_id, **data})
        except AzureError as e:
            return _to_err(e)
        return Ok(doc_id)

    async def update_document(self, doc_id: str, fields: dict[str, Any]) -> Result[None]:
        """Overwrite only the given top-level fields of an existing document."""
        if not self.container:
            return not_configured("DocumentStore")

        operations = [{"op": "set", "path": f"/{name}", "value": value} for name, value in fields.items()]
        try:
            await self.container.patch_item(
                item=doc_id,
                partition_key=doc_id,
                patch_operations=operations,
            )
        except AzureError as e:
            return _to_err(e)
        return Ok(None)

    async def delete_document(self, doc_id: str) -> Result[None]:
        if not self.container:
            return not_configured("DocumentStore")

        try:
            await self.container.delete_item(item=doc_id, partition_key=doc_id)
        except AzureError as e:
            return _to_err(e)
        return Ok(None)

    async def check_connection(self) -> bool:
        if not self.container:
            return False
        try:
            query = "SELECT VALUE COUNT(1) FROM c"
            async for _ in self.container.query_items(
                query=query,
                enable_cross_partition_query=True,
            ):
                return True
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False

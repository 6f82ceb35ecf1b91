from __future__ import annotations

import logging
from urllib.parse import quote

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from employee_portal.core.config import Settings
from employee_portal.core.result import Err, Ok, Result, not_configured

logger = logging.getLogger(__name__)


class BlobStore:
    def __init__(self) -> None:
        self.session: aioboto3.Session | None = None
        self.initialized = False
        self.bucket = ""
        self.region = ""
        self.endpoint_url: str | None = None
        self.public_base_url = ""

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.STORAGE_BUCKET:
            logger.warning("Storage bucket missing, BlobStore not initialized")
            return

        self.session = aioboto3.Session(
            aws_access_key_id=settings.STORAGE_ACCESS_KEY or None,
            aws_secret_access_key=settings.STORAGE_SECRET_KEY or None,
            region_name=settings.STORAGE_REGION,
        )
        self.bucket = settings.STORAGE_BUCKET
        self.region = settings.STORAGE_REGION
        self.endpoint_url = settings.STORAGE_ENDPOINT_URL.rstrip("/") or None
        self.public_base_url = settings.STORAGE_PUBLIC_BASE_URL.rstrip("/")
        self.initialized = True
        logger.info("BlobStore initialized (bucket=%s)", self.bucket)

    async def close(self) -> None:
        self.session = None
        self.initialized = False
        self.bucket = ""
        self.endpoint_url = None
        self.public_base_url = ""

    def public_url(self, key: str) -> str:
        path = quote(key, safe="/")
        if self.public_base_url:
            return f"{self.public_base_url}/{path}"
        if self.endpoint_url:
            return f"{self.endpoint_url}/{self.bucket}/{path}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{path}"

    async def upload(self, key: str, data: bytes, content_type: str | None = None) -> Result[str]:
        """Store ``data`` under ``key`` and return the object's download URL."""
        if not self.initialized or not self.session:
            return not_configured("BlobStore")

        extra: dict[str, str] = {}
        if content_type:
            extra["ContentType"] = content_type

        try:
            async with self.session.client("s3", endpoint_url=self.endpoint_url) as s3:
                await s3.put_object(Bucket=self.bucket, Key=key, Body=data, **extra)
        except ClientError as e:
            error = e.response.get("Error", {})
            return Err(code=str(error.get("Code", "unknown")), message=str(error.get("Message", e)))
        except BotoCoreError as e:
            return Err(code="unavailable", message=str(e))

        logger.info("Uploaded %d bytes to %s", len(data), key)
        return Ok(self.public_url(key))

    async def check_connection(self) -> bool:
        if not self.initialized or not self.session:
            return False
        try:
            async with self.session.client("s3", endpoint_url=self.endpoint_url) as s3:
                await s3.head_bucket(Bucket=self.bucket)
            return True
        except Exception:
            logger.exception("BlobStore connection check failed")
            return False

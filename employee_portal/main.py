from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_portal.api.router import api_router
from employee_portal.core.config import settings
from employee_portal.core.logging import configure_logging
from employee_portal.core.middleware import RequestSizeLimitMiddleware
from employee_portal.services.auth_provider import AuthProvider
from employee_portal.services.blob_store import BlobStore
from employee_portal.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    document_store = DocumentStore()
    blob_store = BlobStore()
    auth_provider = AuthProvider()

    try:
        await document_store.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize DocumentStore, continuing without DB")
    try:
        await blob_store.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize BlobStore, continuing without storage")
    try:
        await auth_provider.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize AuthProvider, continuing without auth")

    application.state.document_store = document_store
    application.state.blob_store = blob_store
    application.state.auth_provider = auth_provider
    yield
    await document_store.close()
    await blob_store.close()
    await auth_provider.close()


app = FastAPI(
    title="Employee Portal API",
    description="Employee records, photo uploads and user accounts",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.MAX_REQUEST_BODY_BYTES)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Portal API"}


def run() -> None:
    import uvicorn

    configure_logging(settings.LOG_LEVEL)
    logger.info("Server running at http://localhost:%d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()

from __future__ import annotations

from fastapi import APIRouter, Depends

from employee_portal.core.config import settings
from employee_portal.core.dependencies import get_auth_provider, get_blob_store, get_document_store
from employee_portal.services.auth_provider import AuthProvider
from employee_portal.services.blob_store import BlobStore
from employee_portal.services.document_store import DocumentStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    documents: DocumentStore = Depends(get_document_store),  # noqa: B008
    blobs: BlobStore = Depends(get_blob_store),  # noqa: B008
    auth: AuthProvider = Depends(get_auth_provider),  # noqa: B008
):
    services: dict[str, str] = {}

    try:
        if documents.initialized:
            ok = await documents.check_connection()
            services["cosmos_db"] = "ok" if ok else "error"
        else:
            services["cosmos_db"] = "not_configured"
    except Exception:
        services["cosmos_db"] = "error"

    try:
        if blobs.initialized:
            ok = await blobs.check_connection()
            services["blob_storage"] = "ok" if ok else "error"
        else:
            services["blob_storage"] = "not_configured"
    except Exception:
        services["blob_storage"] = "error"

    services["firebase_auth"] = "configured" if auth.initialized else "not_configured"

    all_ok = all(v in ("ok", "configured", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}

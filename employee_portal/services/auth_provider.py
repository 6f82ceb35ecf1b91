"""Firebase Authentication (Identity Toolkit REST API) client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from employee_portal.core.config import Settings
from employee_portal.core.result import Err, Ok, Result, not_configured
from employee_portal.models.auth import AuthUser

logger = logging.getLogger(__name__)

# REST error strings → client SDK error codes
_ERROR_CODES: dict[str, str] = {
    "EMAIL_EXISTS": "auth/email-already-in-use",
    "EMAIL_NOT_FOUND": "auth/user-not-found",
    "INVALID_PASSWORD": "auth/wrong-password",
    "INVALID_LOGIN_CREDENTIALS": "auth/invalid-credential",
    "INVALID_EMAIL": "auth/invalid-email",
    "MISSING_EMAIL": "auth/missing-email",
    "MISSING_PASSWORD": "auth/missing-password",
    "WEAK_PASSWORD": "auth/weak-password",
    "USER_DISABLED": "auth/user-disabled",
    "OPERATION_NOT_ALLOWED": "auth/operation-not-allowed",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "auth/too-many-requests",
}


def provider_error(raw_message: str) -> Err:
    # e.g. "WEAK_PASSWORD : Password should be at least 6 characters"
    reason = raw_message.split(" : ", 1)[0].strip()
    code = _ERROR_CODES.get(reason)
    if code is None:
        return Err(code="auth/internal-error", message=f"Firebase: {raw_message}")
    return Err(code=code, message=f"Firebase: Error ({code}).")


class AuthProvider:
    def __init__(self) -> None:
        self.initialized = False
        self.endpoint = ""
        self.api_key = ""

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.FIREBASE_API_KEY:
            logger.warning("Firebase API key missing, AuthProvider not initialized")
            return

        self.endpoint = settings.FIREBASE_AUTH_ENDPOINT.rstrip("/")
        self.api_key = settings.FIREBASE_API_KEY
        self.initialized = True

    async def close(self) -> None:
        self.initialized = False
        self.endpoint = ""
        self.api_key = ""

    async def _call(self, method: str, payload: dict[str, Any]) -> Result[dict[str, Any]]:
        if not self.initialized:
            return not_configured("AuthProvider")

        url = f"{self.endpoint}/accounts:{method}?key={self.api_key}"
        headers = {"Content-Type": "application/json"}

        try:
            timeout = aiohttp.ClientTimeout(total=30)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(url, headers=headers, json=payload) as response:
                    data = await response.json(content_type=None)
                    if response.status == 200:
                        return Ok(data or {})

                    message = ""
                    if isinstance(data, dict):
                        message = (data.get("error") or {}).get("message", "")
                    logger.info("Identity Toolkit %s failed (%s): %s", method, response.status, message)
                    return provider_error(message or f"HTTP {response.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Identity Toolkit %s request failed: %s", method, e)
            return Err(code="auth/network-request-failed", message="Firebase: Error (auth/network-request-failed).")
        except ValueError as e:
            logger.error("Identity Toolkit %s returned an unreadable body: %s", method, e)
            return Err(code="auth/internal-error", message=f"Firebase: {e}")

    @staticmethod
    def _to_user(data: dict[str, Any]) -> AuthUser:
        return AuthUser(
            uid=data.get("localId", ""),
            email=data.get("email"),
            displayName=data.get("displayName") or None,
        )

    async def create_user(self, email: str, password: str) -> Result[AuthUser]:
        result = await self._call(
            "signUp",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        if isinstance(result, Err):
            return result
        return Ok(self._to_user(result.value))

    async def sign_in(self, email: str, password: str) -> Result[AuthUser]:
        result = await self._call(
            "signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        if isinstance(result, Err):
            return result
        return Ok(self._to_user(result.value))

    async def send_password_reset_email(self, email: str) -> Result[None]:
        result = await self._call("sendOobCode", {"requestType": "PASSWORD_RESET", "email": email})
        if isinstance(result, Err):
            return result
        return Ok(None)

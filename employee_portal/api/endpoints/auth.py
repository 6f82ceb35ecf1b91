from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from employee_portal.core.dependencies import get_auth_provider
from employee_portal.core.result import Err
from employee_portal.models.auth import AuthResponse, Credentials, MessageResponse, ResetEmailRequest
from employee_portal.services.auth_provider import AuthProvider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _auth_error(status_code: int, message: str, error: Err) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"message": message, "error": error.message, "code": error.code},
    )


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register_user(
    credentials: Credentials,
    provider: AuthProvider = Depends(get_auth_provider),  # noqa: B008
):
    result = await provider.create_user(credentials.email, credentials.password)
    if isinstance(result, Err):
        logger.info("Error registering user: %s", result.message)
        raise _auth_error(status.HTTP_400_BAD_REQUEST, "Error registering user", result)

    return AuthResponse(message="User registered successfully", user=result.value)


@router.post("/login", response_model=AuthResponse)
async def login_user(
    credentials: Credentials,
    provider: AuthProvider = Depends(get_auth_provider),  # noqa: B008
):
    result = await provider.sign_in(credentials.email, credentials.password)
    if isinstance(result, Err):
        logger.info("Error logging in user: %s", result.message)
        raise _auth_error(status.HTTP_401_UNAUTHORIZED, "Invalid credentials", result)

    return AuthResponse(message="User logged in successfully", user=result.value)


@router.post("/resetEmail", response_model=MessageResponse)
async def reset_email(
    request: ResetEmailRequest,
    provider: AuthProvider = Depends(get_auth_provider),  # noqa: B008
):
    result = await provider.send_password_reset_email(request.email)
    if isinstance(result, Err):
        logger.warning("Error sending password reset email: %s (%s)", result.message, result.code)
        raise _auth_error(status.HTTP_400_BAD_REQUEST, "Error sending password reset email", result)

    return MessageResponse(message="Password reset email sent")

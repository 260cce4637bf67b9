# File: authportal/api/routes_auth.py

"""
Auth API routes.

``POST /login`` registers a new account; it does not authenticate an
existing one. Every outcome is answered as ``{"message": ...}``.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from authportal.api.deps import get_app_settings, get_user_repository
from authportal.core.config import Settings
from authportal.repository.user_repository import UserRepository
from authportal.schemas.user import MessageResponse, UserCredentials
from authportal.services.auth_service import register_user
from authportal.services.errors import MissingCredentialsError, RegistrationError

logger = logging.getLogger(__name__)

router = APIRouter()

REGISTERED_MESSAGE = "User registered successfully"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post(
    "/login",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an account",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_409_CONFLICT: {"model": MessageResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
    },
)
def login(
    payload: UserCredentials,
    repository: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    try:
        register_user(
            repository,
            email=payload.email,
            password=payload.password,
            rounds=settings.bcrypt_rounds,
        )
    except RegistrationError as exc:
        return _message(exc.status_code, exc.message)
    except Exception:
        logger.exception("Registration failed for %s", payload.email)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, RegistrationError.message)

    return MessageResponse(message=REGISTERED_MESSAGE)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed or absent bodies with the same 400 as empty fields."""
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _message(MissingCredentialsError.status_code, MissingCredentialsError.message)

"""Authentication routes.

Sign-in happens at the identity provider; these routes only report who the
token belongs to and clear the session cookie.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from threads.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from threads.config import AuthSettings
from threads.domain.error import DomainError
from threads.interface.api.auth import extract_token
from threads.interface.error import to_http_exception
from threads.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class AuthStatusResponse(BaseModel):
    """Authentication status.

    ``current`` is set whenever the token is valid, even before onboarding.
    """

    authenticated: bool
    current: GetCurrentUserResponse | None = None


class SignOutResponse(BaseModel):
    """Sign-out response."""

    success: bool
    redirect_to: str


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a token: it returns ``authenticated=false`` rather
    than an error so the client can check state quietly. A valid token
    without a profile comes back with ``onboarded=false``, which tells the
    client to send the user to onboarding.
    """
    token = extract_token(request, auth_settings)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        current = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
        return AuthStatusResponse(authenticated=True, current=current)
    except (JWTError, DomainError):
        # Invalid or expired token - expected, not an error
        return AuthStatusResponse(authenticated=False)
    except Exception as e:
        raise to_http_exception(e, "get current user") from e


@router.post("/sign-out", response_model=SignOutResponse)
async def sign_out(
    response: Response,
    auth_settings: FromDishka[AuthSettings],
) -> SignOutResponse:
    """Clear the auth cookie and tell the client where to go next."""
    response.delete_cookie(key=auth_settings.cookie_name, path="/")
    return SignOutResponse(success=True, redirect_to=auth_settings.sign_in_path)

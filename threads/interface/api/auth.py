"""Resolving the signed-in user for a request.

The identity provider's token arrives either as a bearer token or in the
auth cookie. Only its subject (the external user id) is used.
"""

from fastapi import HTTPException, Request, status

from threads.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from threads.application.usecase.user import UserProfile
from threads.config import AuthSettings
from threads.interface.error import to_http_exception


def extract_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Read the token from the Authorization header or the auth cookie."""
    authorization = request.headers.get("Authorization")
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
    return request.cookies.get(auth_settings.cookie_name)


async def authenticate(
    request: Request,
    use_case: GetCurrentUserUseCase,
    auth_settings: AuthSettings,
) -> GetCurrentUserResponse:
    """Verify the request's token and look up the profile.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    token = extract_token(request, auth_settings)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )

    try:
        return await use_case.execute(GetCurrentUserRequest(token=token))
    except Exception as e:
        raise to_http_exception(e, "authenticate") from e


async def require_profile(
    request: Request,
    use_case: GetCurrentUserUseCase,
    auth_settings: AuthSettings,
) -> UserProfile:
    """Like ``authenticate`` but also require a finished onboarding.

    Raises:
        HTTPException: 401 if unauthenticated, 403 if not onboarded
    """
    current = await authenticate(request, use_case, auth_settings)
    if current.user is None or not current.onboarded:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Complete onboarding first",
        )
    return current.user

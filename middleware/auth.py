from typing import Optional

from fastapi import Request, HTTPException, status

from services.exceptions import UnauthorizedError
from utils.jwt import get_email_from_token


def authorize(auth_header: Optional[str]) -> str:
    """
    Resolve an Authorization header value to the email it vouches for

    The user record is not looked up here; callers resolve the email themselves.

    Args:
        auth_header: Raw header value, expected as "Bearer <token>"

    Returns:
        Email claim of the verified token

    Raises:
        UnauthorizedError: If the header is missing or malformed, or the token is invalid
    """
    if not auth_header:
        raise UnauthorizedError("Invalid JWT Token")

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise UnauthorizedError("Invalid JWT Token")

    email = get_email_from_token(parts[1])
    if email is None:
        raise UnauthorizedError("Invalid JWT Token")
    return email


async def verify_jwt_middleware(request: Request) -> str:
    """
    Dependency verifying the JWT token in the Authorization header

    Args:
        request: FastAPI request object

    Returns:
        Email of the authenticated user, also attached to request.state

    Raises:
        HTTPException: If token is missing or invalid
    """
    try:
        email = authorize(request.headers.get("Authorization"))
    except UnauthorizedError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.message,
        )

    # Attach user info to request state
    request.state.user_email = email
    return email

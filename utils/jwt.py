import jwt
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

SECRET_KEY = os.getenv("JWT_SECRET")
ALGORITHM = "HS256"

if not SECRET_KEY:
    raise ValueError("JWT_SECRET environment variable is not set")


def create_jwt(email: str) -> str:
    """
    Sign a session token for a user

    Tokens carry only the email claim and are issued without an expiry.

    Args:
        email: Email of the authenticated user

    Returns:
        Encoded JWT string
    """
    return jwt.encode({"email": email}, SECRET_KEY, algorithm=ALGORITHM)


def verify_jwt(token: Optional[str]) -> Optional[dict]:
    """
    Verify JWT token and return payload

    Args:
        token: JWT token string

    Returns:
        Decoded payload if valid, None otherwise
    """
    if not token:
        return None
    try:
        # PyJWT rejects an expired token itself when "exp" is present
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.InvalidTokenError:
        return None


def get_email_from_token(token: Optional[str]) -> Optional[str]:
    """
    Extract the email claim from JWT token

    Args:
        token: JWT token string

    Returns:
        Email if valid token, None otherwise
    """
    payload = verify_jwt(token)
    if payload:
        email = payload.get("email")
        if isinstance(email, str) and email:
            return email
    return None

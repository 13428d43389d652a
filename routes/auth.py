from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from database import get_session
from schemas import (
    RegisterRequest,
    LoginRequest,
    MessageResponse,
    TokenResponse,
    UserProfileResponse,
)
from middleware.auth import verify_jwt_middleware
from services.users import register_user, authenticate_user, resolve_user
from utils.jwt import create_jwt

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED
)
def register(
    body: RegisterRequest,
    session: Session = Depends(get_session)
) -> MessageResponse:
    """
    Register a new user

    Args:
        body: Username, email and password
        session: Database session

    Returns:
        Confirmation message
    """
    register_user(session, body.username, body.email, body.password)
    return MessageResponse(message="User Registered Successfully")


@router.post(
    "/login",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED
)
def login(
    body: LoginRequest,
    session: Session = Depends(get_session)
) -> TokenResponse:
    """
    Exchange email and password for a bearer token

    Args:
        body: Email and password
        session: Database session

    Returns:
        Signed JWT carrying the user's email
    """
    user = authenticate_user(session, body.email, body.password)
    return TokenResponse(jwtToken=create_jwt(user.email))


@router.get("/profile", response_model=UserProfileResponse)
def get_profile(
    email: str = Depends(verify_jwt_middleware),
    session: Session = Depends(get_session)
) -> UserProfileResponse:
    """Stored row of the authenticated user, password hash included"""
    user = resolve_user(session, email)
    return UserProfileResponse.model_validate(user)

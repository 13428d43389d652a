"""Credential store: user registration, login and identity lookup."""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from models import User
from services.exceptions import ConflictError, StorageError, UnauthorizedError
from utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def get_user_by_email(session: Session, email: str) -> Optional[User]:
    """Return the user with this exact email, or None."""
    try:
        return session.exec(select(User).where(User.email == email)).first()
    except SQLAlchemyError as exc:
        logger.exception("User lookup failed")
        raise StorageError() from exc


def register_user(session: Session, username: str, email: str, password: str) -> int:
    """
    Create a user with a bcrypt-hashed password.

    Raises:
        ConflictError: The email is already registered.
        StorageError: The database read or insert failed.
    """
    if get_user_by_email(session, email) is not None:
        logger.info("Registration rejected, email already registered")
        raise ConflictError("User Already Exists")

    user = User(username=username, email=email, password=hash_password(password))
    try:
        session.add(user)
        session.commit()
        session.refresh(user)
    except IntegrityError as exc:
        # Another request registered the same email between the read and the insert
        session.rollback()
        logger.info("Registration rejected by unique constraint on email")
        raise ConflictError("User Already Exists") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to insert user")
        raise StorageError() from exc

    logger.info("Registered user id=%s", user.id)
    return user.id


def authenticate_user(session: Session, email: str, password: str) -> User:
    """
    Check login credentials.

    Raises:
        UnauthorizedError: No user has this email, or the password is wrong.
        StorageError: The lookup failed.
    """
    user = get_user_by_email(session, email)
    if user is None:
        logger.info("Login failed, unknown email")
        raise UnauthorizedError("User Doesn't Exist")
    if not verify_password(password, user.password):
        logger.info("Login failed for user id=%s, incorrect password", user.id)
        raise UnauthorizedError("Incorrect Password")
    return user


def resolve_user(session: Session, email: str) -> User:
    """
    Load the user a verified token refers to.

    A failed lookup and a missing user are reported alike, as a server error.
    """
    try:
        user = get_user_by_email(session, email)
    except StorageError as exc:
        raise StorageError("Database error or user not found") from exc
    if user is None:
        logger.warning("Token refers to an email with no user record")
        raise StorageError("Database error or user not found")
    return user

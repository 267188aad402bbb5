"""Registration and login on top of :class:`CredentialStore`."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from heritage_api.auth import hash_password, verify_password
from heritage_api.errors import (
    AuthenticationFailure,
    DuplicateKeyError,
    InternalFailure,
    ValidationFailure,
)
from heritage_api.models.user import User
from heritage_api.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

CREDENTIALS_MISMATCH = "Credentials do not match"


def register(store: CredentialStore, username: str, password: str) -> User:
    """Create a user. Every failure surfaces as a ``ValidationFailure``."""
    password_hash = hash_password(password)
    try:
        user = store.create(username, password_hash)
    except DuplicateKeyError as e:
        raise ValidationFailure(f"Username '{username}' is already taken") from e
    except SQLAlchemyError as e:
        logger.exception("Store error during registration")
        raise ValidationFailure("Could not create user") from e
    logger.info(f"Registered user {user.id} ({user.username})")
    return user


def login(store: CredentialStore, username: str, password: str) -> User:
    try:
        user = store.find_by_username(username)
    except SQLAlchemyError as e:
        logger.exception("Store error during login")
        raise InternalFailure("Could not verify credentials") from e
    if not user or not _password_matches(password, user.password_hash):
        logger.info(f"Failed login for username {username!r}")
        raise AuthenticationFailure(CREDENTIALS_MISMATCH)
    return user


def _password_matches(password: str, password_hash: str) -> bool:
    try:
        return verify_password(password, password_hash)
    except ValueError:
        return False

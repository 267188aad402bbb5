import logging

from fastapi import Depends, Header
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from heritage_api.database import get_session
from heritage_api.errors import AuthorizationFailure, InternalFailure
from heritage_api.models.user import User
from heritage_api.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

PLEASE_LOG_IN = "Please log in"


def get_credential_store(session: Session = Depends(get_session)) -> CredentialStore:
    return CredentialStore(session)


def get_current_user(
    authorization: str | None = Header(default=None),
    store: CredentialStore = Depends(get_credential_store),
) -> User:
    """Resolve the raw ``Authorization`` header to a user or reject with 401."""
    if not authorization:
        raise AuthorizationFailure(PLEASE_LOG_IN)
    try:
        user = store.find_by_token(authorization)
    except SQLAlchemyError as e:
        logger.exception("Store error while checking access token")
        raise InternalFailure("Could not verify access token") from e
    if not user:
        logger.info("Rejected request with unknown access token")
        raise AuthorizationFailure(PLEASE_LOG_IN)
    return user

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from heritage_api.errors import InternalFailure
from heritage_api.models.like import Like
from heritage_api.models.user import User

logger = logging.getLogger(__name__)


def list_likes(session: Session) -> list[Like]:
    try:
        return list(session.exec(select(Like)).all())
    except SQLAlchemyError as e:
        logger.exception("Store error while listing likes")
        raise InternalFailure("Could not load likes") from e


def create_like(
    session: Session, user: User, message: str | None = None, hearts: int = 0
) -> Like:
    # Users may own any number of likes; no duplicate check.
    like = Like(hearts=hearts, message=message, user_id=user.id)
    session.add(like)
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"Store error while creating like for user {user.id}")
        raise InternalFailure("Could not create like") from e
    session.refresh(like)
    return like

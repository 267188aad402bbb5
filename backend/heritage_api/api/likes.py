from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlmodel import Session

from heritage_api.api.deps import get_current_user
from heritage_api.database import get_session
from heritage_api.models.like import Like
from heritage_api.models.user import User
from heritage_api.services.likes import create_like, list_likes

router = APIRouter(prefix="/likes", tags=["likes"])


class CreateLikeRequest(BaseModel):
    message: str | None = None
    hearts: int = Field(default=0, ge=0)


class LikeResponse(BaseModel):
    id: int
    hearts: int
    message: str | None
    user: int


def _to_response(like: Like) -> dict:
    return LikeResponse(
        id=like.id, hearts=like.hearts, message=like.message, user=like.user_id
    ).model_dump()


@router.get("")
def get_likes(
    session: Session = Depends(get_session),
    _user: User = Depends(get_current_user),
):
    likes = list_likes(session)
    return {"success": True, "response": [_to_response(like) for like in likes]}


@router.post("")
def post_like(
    body: CreateLikeRequest | None = None,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    body = body or CreateLikeRequest()
    like = create_like(session, user, message=body.message, hearts=body.hearts)
    return {"success": True, "response": _to_response(like)}

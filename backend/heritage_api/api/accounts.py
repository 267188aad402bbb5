from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from heritage_api.api.deps import get_credential_store
from heritage_api.models.user import User
from heritage_api.services import accounts
from heritage_api.services.credential_store import CredentialStore

router = APIRouter(tags=["accounts"])


class CredentialsRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AccountResponse(BaseModel):
    username: str
    id: int
    access_token: str = Field(serialization_alias="accessToken")


def _envelope(user: User) -> dict:
    account = AccountResponse(
        username=user.username, id=user.id, access_token=user.access_token
    )
    return {"success": True, "response": account.model_dump(by_alias=True)}


@router.post("/register", status_code=201)
def register(
    body: CredentialsRequest,
    store: CredentialStore = Depends(get_credential_store),
):
    user = accounts.register(store, body.username, body.password)
    return _envelope(user)


@router.post("/login")
def login(
    body: CredentialsRequest,
    store: CredentialStore = Depends(get_credential_store),
):
    user = accounts.login(store, body.username, body.password)
    return _envelope(user)

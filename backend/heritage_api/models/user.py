from sqlmodel import Field, SQLModel

from heritage_api.auth import generate_access_token


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True)
    password_hash: str
    access_token: str = Field(
        default_factory=generate_access_token, unique=True, index=True
    )

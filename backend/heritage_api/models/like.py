from sqlmodel import Field, SQLModel


class Like(SQLModel, table=True):
    __tablename__ = "likes"

    id: int | None = Field(default=None, primary_key=True)
    hearts: int = Field(default=0)
    message: str | None = Field(default=None)
    user_id: int = Field(foreign_key="users.id", index=True)

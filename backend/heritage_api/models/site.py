from sqlmodel import Field, SQLModel


class HeritageSite(SQLModel, table=True):
    __tablename__ = "heritage_sites"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(default="")
    description: str = Field(default="")
    country_name: str = Field(default="", index=True)
    location: str = Field(default="", index=True)
    img: str = Field(default="")

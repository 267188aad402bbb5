import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from heritage_api.auth import hash_password
from heritage_api.database import get_session
from heritage_api.main import app
from heritage_api.models.site import HeritageSite
from heritage_api.models.user import User

SITES = [
    dict(
        name="Historic Centre of Rome",
        description="Founded, according to legend, by Romulus and Remus.",
        country_name="Italy",
        location="Rome",
        img="https://i.imgur.com/rome.jpg",
    ),
    dict(
        name="Venice and its Lagoon",
        description="Founded in the 5th century and spread over 118 small islands.",
        country_name="Italy",
        location="Venice",
        img="https://i.imgur.com/venice.jpg",
    ),
    dict(
        name="Paris, Banks of the Seine",
        description="From the Louvre to the Eiffel Tower.",
        country_name="France",
        location="Paris",
        img="https://i.imgur.com/paris.jpg",
    ),
]


@pytest.fixture(autouse=True)
def _fast_bcrypt(monkeypatch):
    """Lowest bcrypt cost so hashing does not dominate test time."""
    monkeypatch.setattr("heritage_api.config.settings.bcrypt_rounds", 4)


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def user(session: Session) -> User:
    user = User(username="traveller", password_hash=hash_password("s3cret"))
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def user_token(user: User) -> str:
    return user.access_token


@pytest.fixture
def sites(session: Session) -> list[HeritageSite]:
    rows = [HeritageSite(**fields) for fields in SITES]
    session.add_all(rows)
    session.commit()
    for row in rows:
        session.refresh(row)
    return rows

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

DRIVER_TEXT = "no such table"


@pytest.fixture
def outage(session: Session):
    """Drop every table so each store query fails at the driver."""
    SQLModel.metadata.drop_all(session.get_bind())


def test_register_during_outage(client: TestClient, outage):
    response = client.post(
        "/register",
        json={"username": "stranded", "password": "pw"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "response": "Could not create user"}
    assert DRIVER_TEXT not in response.text


def test_login_during_outage(client: TestClient, outage):
    response = client.post(
        "/login",
        json={"username": "stranded", "password": "pw"},
    )
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "response": "Could not verify credentials",
    }
    assert DRIVER_TEXT not in response.text


def test_token_check_during_outage(client: TestClient, outage):
    response = client.get("/likes", headers={"Authorization": "some-token"})
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "response": "Could not verify access token",
    }
    assert DRIVER_TEXT not in response.text


def test_list_sites_during_outage(client: TestClient, outage):
    response = client.get("/sites", params={"country": "italy"})
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "body": {"message": "Could not query heritage sites"},
    }
    assert DRIVER_TEXT not in response.text


def test_sites_by_location_during_outage(client: TestClient, outage):
    response = client.get("/sites/Rome")
    assert response.status_code == 500
    assert response.json()["body"] == {"message": "Could not query heritage sites"}
    assert DRIVER_TEXT not in response.text

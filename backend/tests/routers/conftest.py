"""Router test fixtures: a TestClient bound to the in-memory database."""

import pytest
from fastapi.testclient import TestClient

from fitness_tracker.database import get_db
from fitness_tracker.dependencies import get_email_sender
from fitness_tracker.errors import DispatchError
from fitness_tracker.main import app


class FakeEmailSender:
    """Records messages instead of sending them; recipients in ``failing`` raise."""

    def __init__(self):
        self.sent = []
        self.failing = set()

    def send(self, message):
        if message.to_address in self.failing:
            raise DispatchError("relay refused", recipient=message.to_address)
        self.sent.append(message)


@pytest.fixture
def email_sender():
    return FakeEmailSender()


@pytest.fixture
def client(session_factory, email_sender):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    """POST a user and return the JSON body."""

    def _create_user(email="emma.johnson@domain.com", **overrides):
        payload = {
            "first_name": "Emma",
            "last_name": "Johnson",
            "birthdate": "1996-04-12",
            "email": email,
        }
        payload.update(overrides)
        response = client.post("/v1/users/", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create_user

# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.api import contributors as contributors_api
from app.main import app
from tests.helpers import make_response


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def upstream(monkeypatch):
    """
    Replace requests.get with a fake that records calls.

    Set `upstream.response` to a Response or `upstream.error` to an exception.
    """

    class FakeUpstream:
        def __init__(self):
            self.calls = []
            self.response = make_response([])
            self.error = None

        def get(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.error is not None:
                raise self.error
            return self.response

    fake = FakeUpstream()
    monkeypatch.setattr(contributors_api.requests, "get", fake.get)
    return fake


@pytest.fixture
def sample_users():
    """Trimmed copy of the jsonplaceholder /users payload"""
    return [
        {
            "id": 1,
            "name": "Leanne Graham",
            "username": "Bret",
            "email": "Sincere@april.biz",
            "address": {"street": "Kulas Light", "city": "Gwenborough"},
            "phone": "1-770-736-8031 x56442",
            "website": "hildegard.org",
            "company": {
                "name": "Romaguera-Crona",
                "catchPhrase": "Multi-layered client-server neural-net",
                "bs": "harness real-time e-markets",
            },
        },
        {
            "id": 2,
            "name": "Ervin Howell",
            "username": "Antonette",
            "email": "Shanna@melissa.tv",
            "phone": "010-692-6593 x09125",
            "website": "https://anastasia.net",
            "company": {"name": "Deckow-Crist"},
        },
        {
            "id": 3,
            "name": "Clementine Bauch",
            "email": "Nathan@yesenia.net",
            "date": "2024-05-01T12:00:00Z",
        },
    ]

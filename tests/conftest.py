import pytest

from faceit_data import FaceitAPIClient

BASE_URL = "https://open.faceit.com/data/v4"
API_KEY = "test-key-123"
PLAYER_ID = "cf5c2089-b4a6-4201-a69b-9fd608429c79"


class FakeResponse:
    def __init__(self, body, status_code=200):
        self._body = body
        self.status_code = status_code

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class AwaitableJsonResponse(FakeResponse):
    async def json(self):
        return super().json()


class FakeFetch:
    """Records every call and answers with a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else FakeResponse({"items": []})
        self.error = error
        self.calls = []

    async def __call__(self, url, headers):
        self.calls.append((url, dict(headers)))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fetch():
    return FakeFetch()


@pytest.fixture
def client(fetch):
    return FaceitAPIClient(API_KEY, fetch, base_url=BASE_URL)

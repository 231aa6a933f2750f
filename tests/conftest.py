import httpx
import pytest

from userlist_sync.model.user_interface import UserListClient

from tests.helpers import make_driver, EMILY, MICHAEL, JOHN


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def users_handler(requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)

        if request.url.path == '/users/search':
            return httpx.Response(200, json={'users': [JOHN], 'total': 1, 'skip': 0, 'limit': 1})

        return httpx.Response(200, json={'users': [EMILY, MICHAEL], 'total': 2, 'skip': 0, 'limit': 30})

    return handler


@pytest.fixture
def client(users_handler):
    return UserListClient(driver=make_driver(users_handler))

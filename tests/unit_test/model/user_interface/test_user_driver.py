import httpx
import pytest

from userlist_sync.etc.errors import NetworkRequestFailedException, HttpStatusException, \
    ConfigurationParsingException, ResponseDecodeException
from userlist_sync.model import User
from userlist_sync.model.user_interface import UserDriver

from tests.helpers import make_driver, EMILY, MICHAEL


class TestUserDriver:
    @pytest.mark.asyncio
    async def test_find_all(self, users_handler, requests_seen):
        async with make_driver(users_handler) as driver:
            users = await driver.find_all()

        assert users == [User.from_dict(EMILY), User.from_dict(MICHAEL)]
        assert str(requests_seen[0].url) == 'https://dummyjson.com/users'
        assert requests_seen[0].method == 'GET'

    @pytest.mark.asyncio
    @pytest.mark.parametrize('query, expected', [
        ('john', 'https://dummyjson.com/users/search?q=john'),
        ('a b', 'https://dummyjson.com/users/search?q=a%20b'),
        ('', 'https://dummyjson.com/users/search?q='),
    ])
    async def test_search_url(self, users_handler, requests_seen, query, expected):
        async with make_driver(users_handler) as driver:
            await driver.search(query)

        assert str(requests_seen[0].url) == expected

    @pytest.mark.asyncio
    async def test_http_status_error(self):
        driver = make_driver(lambda request: httpx.Response(404, json={'message': 'missing'}))

        with pytest.raises(HttpStatusException) as exc_info:
            await driver.find_all()

        assert exc_info.value.status_code == 404
        await driver.close()

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError('Connection refused', request=request)

        driver = make_driver(handler)

        with pytest.raises(NetworkRequestFailedException):
            await driver.find_all()

        await driver.close()

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        driver = make_driver(lambda request: httpx.Response(200, content=b'<html></html>'))

        with pytest.raises(ResponseDecodeException):
            await driver.find_all()

        await driver.close()

    @pytest.mark.asyncio
    async def test_invalid_envelope(self):
        driver = make_driver(lambda request: httpx.Response(200, json={'users': [{'id': 1}]}))

        with pytest.raises(ResponseDecodeException):
            await driver.search('john')

        await driver.close()

    def test_invalid_base_url(self):
        with pytest.raises(ConfigurationParsingException):
            UserDriver(base_url='dummyjson.com')

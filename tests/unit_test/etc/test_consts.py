import httpx
import pytest

from userlist_sync.etc.consts import ServiceConfig, SERVICE_CONFIG
from userlist_sync.model.user_interface import UserDriver


class TestServiceConfig:
    def test_defaults(self, monkeypatch):
        for name in ('ULS_BASE_URL', 'ULS_REQUEST_TIMEOUT', 'ULS_LOGGING_LEVEL'):
            monkeypatch.delenv(name, raising=False)

        config = ServiceConfig(_env_file=None)

        assert config.base_url == 'https://dummyjson.com'
        assert config.request_timeout is None
        assert config.logging_level == 'INFO'

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv('ULS_BASE_URL', 'http://localhost:8080')
        monkeypatch.setenv('ULS_REQUEST_TIMEOUT', '2.5')

        config = ServiceConfig(_env_file=None)

        assert config.base_url == 'http://localhost:8080'
        assert config.request_timeout == 2.5


class TestDriverConfiguration:
    @pytest.mark.asyncio
    async def test_timeout_from_config(self, monkeypatch):
        monkeypatch.setattr(SERVICE_CONFIG, 'request_timeout', 2.5)

        async with UserDriver() as driver:
            assert driver._client.timeout == httpx.Timeout(2.5)

    @pytest.mark.asyncio
    async def test_no_timeout_by_default(self, monkeypatch):
        monkeypatch.setattr(SERVICE_CONFIG, 'request_timeout', None)

        async with UserDriver() as driver:
            assert driver._client.timeout == httpx.Timeout(None)

    @pytest.mark.asyncio
    async def test_base_url_from_config(self, monkeypatch):
        monkeypatch.setattr(SERVICE_CONFIG, 'base_url', 'http://localhost:8080/')

        async with UserDriver() as driver:
            assert driver.base_url == 'http://localhost:8080'

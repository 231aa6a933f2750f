import httpx

from userlist_sync.etc.consts import LOGGER, SERVICE_CONFIG
from userlist_sync.etc.errors import NetworkRequestFailedException, HttpStatusException, \
    ResponseDecodeException
from userlist_sync.etc.utils import normalise_base_url, build_list_url, build_search_url
from ..user import User, UsersResponse


class UserDriver:
    """
    A utility class to fetch user records from the remote endpoint
    """
    def __init__(self,
                 client: httpx.AsyncClient = None,
                 base_url: str = None,
                 ):
        self.base_url = normalise_base_url(base_url or SERVICE_CONFIG.base_url)

        if client is not None:
            self._client = client
        else:
            self._client = httpx.AsyncClient(
                headers={
                    'Accept': 'application/json',
                },
                timeout=SERVICE_CONFIG.request_timeout,
            )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """
        Close the internal client
        """
        await self._client.aclose()

    async def raw_get(self,
                      url: str,
                      ):
        """
        A raw method to perform a GET request.
        :param url: The URL to request
        :return: JSON response from the server
        :raises NetworkRequestFailedException: If the endpoint cannot be reached
        :raises HttpStatusException: If the endpoint answers with a non-2xx status
        :raises ResponseDecodeException: If the body is not valid JSON
        """
        LOGGER.info('Performing GET request to %s', url)

        try:
            response = await self._client.get(url)
        except httpx.RequestError as e:
            raise NetworkRequestFailedException(
                message=f'Error performing GET request to {url}: {e}',
            ) from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise HttpStatusException(
                message=f'GET request to {url} failed with '
                        f'status code {e.response.status_code}',
                status_code=e.response.status_code,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeException(
                message=f'Response from {url} is not valid JSON',
            ) from e

    async def get_users(self,
                        url: str,
                        ) -> list[User]:
        """
        Fetch a collection envelope and decode the users in it.
        :param url: The URL of a list or search endpoint
        :return: The users, in response order
        """
        payload = await self.raw_get(url)
        users = UsersResponse.from_dict(payload).users

        LOGGER.debug('Decoded %d users from %s', len(users), url)

        return users

    async def find_all(self) -> list[User]:
        """
        Fetch all users.
        :return: The users, in response order
        """
        return await self.get_users(build_list_url(self.base_url))

    async def search(self,
                     query: str,
                     ) -> list[User]:
        """
        Fetch the users matching a free text query.
        :param query: Text to search for, percent-encoded before sending
        :return: The matching users, in response order
        """
        return await self.get_users(build_search_url(self.base_url, query))

from typing import Callable, Iterable
from urllib.parse import quote

from userlist_sync.etc.consts import LOGGER
from userlist_sync.etc.errors import ConfigurationParsingException, RequestBuildException


def normalise_base_url(base_url: str) -> str:
    """
    Validate the base URL of the remote endpoint and strip trailing slashes.
    :param base_url: The configured base URL
    :return: The base URL without trailing slashes
    :raises ConfigurationParsingException: If the URL is not HTTP or HTTPS
    """
    if not base_url or not base_url.startswith(('http://', 'https://')):
        raise ConfigurationParsingException(
            f'Base URL must be an HTTP or HTTPS URL: {base_url!r}'
        )

    return base_url.rstrip('/')


def build_list_url(base_url: str) -> str:
    return f'{normalise_base_url(base_url)}/users'


def build_search_url(base_url: str,
                     query: str,
                     ) -> str:
    """
    Build the search URL with the query percent-encoded as a single
    query component. An empty query is kept as an empty parameter.
    :param base_url: The base URL of the remote endpoint
    :param query: Free text to search for
    :return: The full search URL
    :raises RequestBuildException: If the query cannot be encoded as UTF-8
    """
    try:
        encoded = quote(query, safe='')
    except UnicodeEncodeError as e:
        raise RequestBuildException(
            f'Search query cannot be encoded: {query!r}'
        ) from e

    return f'{build_list_url(base_url)}/search?q={encoded}'


def notify_listeners(listeners: Iterable[Callable],
                     event,
                     ):
    """
    Deliver an event to every listener. A failing listener is logged and
    does not prevent delivery to the others.
    :param listeners: Callables accepting the event
    :param event: The event to deliver
    """
    for listener in list(listeners):
        try:
            listener(event)
        except Exception:
            LOGGER.exception('Listener %r failed while handling %s', listener, event)

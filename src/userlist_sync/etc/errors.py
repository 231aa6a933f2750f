"""
Exception definitions for userlist-sync package
"""


class UserListSyncException(Exception):
    """
    Base class for all exceptions raised by the package.
    """

    def __init__(self,
                 message: str = None,
                 status_code: int = 500,
                 ):
        super().__init__(message)

        self.message = message
        self.status_code = status_code


class ConfigurationParsingException(UserListSyncException):
    """
    Exception raised when there is an error parsing the configuration.
    """
    def __init__(self,
                 message: str = 'Error parsing configuration.',
                 status_code: int = 400,
                 ):
        super().__init__(message, status_code)


class NetworkRequestFailedException(UserListSyncException):
    """
    Exception raised when a request cannot reach the remote endpoint.
    """
    def __init__(self,
                 message: str = 'Network request failed.',
                 status_code: int = 502,
                 ):
        super().__init__(message, status_code)


class HttpStatusException(UserListSyncException):
    """
    Exception raised when the remote endpoint answers with a non-2xx status.
    The status code is the one returned by the remote endpoint.
    """
    def __init__(self,
                 message: str = 'Remote endpoint returned an error status.',
                 status_code: int = 502,
                 ):
        super().__init__(message, status_code)


class ResponseDecodeException(UserListSyncException):
    """
    Exception raised when a response body does not match the expected shape.
    """
    def __init__(self,
                 message: str = 'Error decoding response body.',
                 status_code: int = 502,
                 ):
        super().__init__(message, status_code)


class RequestBuildException(UserListSyncException):
    """
    Exception raised when a request cannot be built from the given input.
    """
    def __init__(self,
                 message: str = 'Error building request.',
                 status_code: int = 400,
                 ):
        super().__init__(message, status_code)

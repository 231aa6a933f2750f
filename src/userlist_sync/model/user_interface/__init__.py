from .user_driver import UserDriver
from .user_list_client import UserListClient, FetchResult

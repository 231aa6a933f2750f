import httpx

from userlist_sync.model import User
from userlist_sync.model.user_interface import UserDriver


BASE_URL = 'https://dummyjson.com'

EMILY = {
    'id': 1,
    'firstName': 'Emily',
    'lastName': 'Johnson',
    'maidenName': 'Smith',
    'email': 'emily.johnson@x.dummyjson.com',
    'age': 28,
}
MICHAEL = {
    'id': 2,
    'firstName': 'Michael',
    'lastName': 'Williams',
    'email': 'michael.williams@x.dummyjson.com',
    'age': 35,
}
JOHN = {
    'id': 3,
    'firstName': 'John',
    'lastName': 'Doe',
    'email': 'john.doe@x.dummyjson.com',
    'age': 41,
}


def make_driver(handler) -> UserDriver:
    """
    Build a driver whose requests are answered by the given handler.
    """
    return UserDriver(
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        base_url=BASE_URL,
    )


def make_user(user_id: int, first_name: str = 'A') -> User:
    return User(
        user_id=user_id,
        first_name=first_name,
        last_name='Example',
        email=f'user{user_id}@example.com',
        age=30,
    )

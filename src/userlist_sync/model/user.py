from userlist_sync.etc.errors import ResponseDecodeException
from .base_model import BaseModel


def _read_field(payload: dict,
                key: str,
                expected_type: type,
                ):
    """
    Read a required field from a wire payload, checking its JSON type.
    :param payload: The decoded JSON object
    :param key: The wire key to read
    :param expected_type: int or str
    :return: The field value
    :raises ResponseDecodeException: If the key is missing or has the wrong type
    """
    if not isinstance(payload, dict):
        raise ResponseDecodeException(
            f'Expected a JSON object, got {type(payload).__name__}'
        )

    try:
        value = payload[key]
    except KeyError as e:
        raise ResponseDecodeException(
            f'Missing required field: {key}'
        ) from e

    # bool is a subclass of int, but JSON true/false is not a number
    if isinstance(value, bool) or not isinstance(value, expected_type):
        raise ResponseDecodeException(
            f'Field {key} must be of type {expected_type.__name__}, '
            f'got {type(value).__name__}'
        )

    return value


def parse_age(age_text: str) -> int:
    """
    Parse the age typed into a form, falling back to 0 for anything
    that is not an integer.
    """
    try:
        return int(age_text.strip())
    except (AttributeError, ValueError):
        return 0


class UserDetails(BaseModel):
    """
    The editable fields shared by new and existing user records.
    """
    def __init__(self,
                 first_name: str,
                 last_name: str,
                 email: str,
                 age: int,
                 ):
        """
        The editable fields shared by new and existing user records.
        :param first_name: First name of the user
        :param last_name: Last name of the user
        :param email: Email address of the user
        :param age: Age of the user in years
        """
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.age = age

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'

    def to_dict(self) -> dict:
        return {
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'age': self.age,
        }

    @staticmethod
    def _details_from_dict(payload: dict) -> dict:
        return {
            'first_name': _read_field(payload, 'firstName', str),
            'last_name': _read_field(payload, 'lastName', str),
            'email': _read_field(payload, 'email', str),
            'age': _read_field(payload, 'age', int),
        }


class NewUser(UserDetails):
    """
    A user record that has not been assigned an ID yet.
    """
    def with_id(self, user_id: int) -> 'User':
        """
        Materialise the draft into a user record with the given ID.
        :param user_id: The ID to assign
        :return: A User instance carrying the same fields
        """
        return User(
            user_id=user_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            age=self.age,
        )

    @classmethod
    def from_dict(cls, payload: dict) -> 'NewUser':
        return cls(**cls._details_from_dict(payload))

    @classmethod
    def from_form(cls,
                  first_name: str,
                  last_name: str,
                  email: str,
                  age_text: str,
                  ) -> 'NewUser':
        """
        Build a draft from the raw text of an edit form.
        :param first_name: First name as typed
        :param last_name: Last name as typed
        :param email: Email as typed
        :param age_text: Age as typed, 0 if it is not an integer
        :return: A NewUser instance
        """
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=email,
            age=parse_age(age_text),
        )


class User(UserDetails):
    """
    A user record as served by the remote endpoint.
    """
    def __init__(self,
                 user_id: int,
                 first_name: str,
                 last_name: str,
                 email: str,
                 age: int,
                 ):
        """
        A user record as served by the remote endpoint.
        :param user_id: The unique ID of the user
        :param first_name: First name of the user
        :param last_name: Last name of the user
        :param email: Email address of the user
        :param age: Age of the user in years
        """
        super().__init__(
            first_name=first_name,
            last_name=last_name,
            email=email,
            age=age,
        )

        self.user_id = user_id

    def to_form(self) -> dict:
        """
        Text values used to pre-fill an edit form for this user.
        :return: A dictionary keyed by the from_form parameter names
        """
        return {
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'age_text': str(self.age),
        }

    def to_dict(self) -> dict:
        return {
            'id': self.user_id,
            **super().to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: dict) -> 'User':
        details = cls._details_from_dict(payload)

        return cls(
            user_id=_read_field(payload, 'id', int),
            **details,
        )

    @classmethod
    def from_form(cls,
                  user_id: int,
                  first_name: str,
                  last_name: str,
                  email: str,
                  age_text: str,
                  ) -> 'User':
        """
        Build an edited user from the raw text of an edit form.
        :param user_id: The ID of the user being edited
        :param first_name: First name as typed
        :param last_name: Last name as typed
        :param email: Email as typed
        :param age_text: Age as typed, 0 if it is not an integer
        :return: A User instance
        """
        return cls(
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            age=parse_age(age_text),
        )


class UsersResponse(BaseModel):
    """
    The collection envelope returned by the list and search endpoints.
    """
    def __init__(self,
                 users: list[User],
                 ):
        self.users = users

    def to_dict(self) -> dict:
        return {
            'users': [user.to_dict() for user in self.users],
        }

    @classmethod
    def from_dict(cls, payload: dict) -> 'UsersResponse':
        if not isinstance(payload, dict):
            raise ResponseDecodeException(
                f'Expected a JSON object, got {type(payload).__name__}'
            )

        users = payload.get('users')
        if not isinstance(users, list):
            raise ResponseDecodeException(
                'Response envelope must contain a users list'
            )

        return cls(
            users=[User.from_dict(u) for u in users],
        )

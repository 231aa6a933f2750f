import threading
from typing import Iterable, Iterator

from .user import User


class UserCollection:
    """
    An ordered, in-memory collection of user records.

    Records keep the order in which they arrived from the last fetch, with
    locally added records appended to the end. Lookups by ID resolve to the
    first matching record, as duplicate IDs are allowed.
    """
    def __init__(self, users: Iterable[User] = None):
        self._users: list[User] = list(users) if users else []
        self._lock = threading.RLock()

    def __len__(self):
        with self._lock:
            return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> User:
        with self._lock:
            return self._users[index]

    def snapshot(self) -> tuple[User, ...]:
        """
        Return an immutable copy of the current records, in order.
        """
        with self._lock:
            return tuple(self._users)

    def ids(self) -> list[int]:
        with self._lock:
            return [u.user_id for u in self._users]

    def next_user_id(self) -> int:
        """
        The ID following the largest one currently held, 1 if empty.
        """
        with self._lock:
            return max((u.user_id for u in self._users), default=0) + 1

    def replace(self, users: Iterable[User]):
        """
        Replace all records with the given sequence.
        :param users: The new records, in order
        """
        users = list(users)
        with self._lock:
            self._users = users

    def append(self, user: User):
        with self._lock:
            self._users.append(user)

    def index_of(self, user_id: int) -> int | None:
        """
        Find the position of the first record with the given ID.
        :param user_id: The ID to look for
        :return: The index, or None if no record matches
        """
        with self._lock:
            return next(
                (i for i, u in enumerate(self._users) if u.user_id == user_id),
                None,
            )

    def replace_first(self, user: User) -> bool:
        """
        Replace the first record sharing the ID of the given user, in place.
        :param user: The updated record
        :return: True if a record was replaced, False if none matched
        """
        with self._lock:
            index = self.index_of(user.user_id)
            if index is None:
                return False

            self._users[index] = user
            return True

    def remove_first(self, user_id: int) -> User | None:
        """
        Remove the first record with the given ID.
        :param user_id: The ID of the record to remove
        :return: The removed record, or None if none matched
        """
        with self._lock:
            index = self.index_of(user_id)
            if index is None:
                return None

            return self._users.pop(index)

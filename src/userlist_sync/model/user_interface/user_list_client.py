from typing import Awaitable, Callable

from userlist_sync.etc.consts import LOGGER
from userlist_sync.etc.enums import RequestStatus, UserListEventType
from userlist_sync.etc.errors import UserListSyncException
from userlist_sync.etc.utils import notify_listeners
from ..user import User, NewUser
from ..user_collection import UserCollection
from ..user_list_event import UserListEvent
from .user_driver import UserDriver


class FetchResult:
    def __init__(self,
                 users: tuple[User, ...] | None = None,
                 error: UserListSyncException | None = None,
                 ):
        """
        Outcome of a single fetch.
        :param users: The fetched users, None if the fetch failed
        :param error: The failure, None if the fetch succeeded
        """
        self.users = users
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None


class UserListClient:
    """
    Holds a collection of user records fetched from the remote endpoint
    and applies local edits to it.

    Fetches replace the whole collection when they complete, in completion
    order: with several fetches outstanding, the one finishing last wins.
    Failed fetches leave the collection untouched. Add, edit and delete only
    change the local collection and are never sent to the remote endpoint.

    Mutations are meant to be called from the thread running the event
    loop; the collection serialises access internally if other threads
    call in as well. Listeners are notified outside that lock, so with
    several threads mutating at once the snapshot carried by an event is
    best-effort and may already include a later change.

    A cancelled fetch leaves the collection untouched and, once no other
    fetch is outstanding, restores the status of the last completed one.
    """
    def __init__(self,
                 driver: UserDriver = None,
                 ):
        if driver is not None:
            self._driver = driver
        else:
            self._driver = UserDriver()

        self._collection = UserCollection()
        self._listeners: list[Callable[[UserListEvent], None]] = []
        self._pending = 0
        self._status = RequestStatus.IDLE
        self._outcome = RequestStatus.IDLE
        self.last_error: UserListSyncException | None = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """
        Close the underlying driver
        """
        await self._driver.close()

    @property
    def users(self) -> tuple[User, ...]:
        return self._collection.snapshot()

    @property
    def status(self) -> RequestStatus:
        return self._status

    def subscribe(self,
                  listener: Callable[[UserListEvent], None],
                  ) -> Callable[[], None]:
        """
        Register a listener called with a UserListEvent on every change.
        :param listener: Callable accepting a UserListEvent
        :return: A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self,
                 event_type: UserListEventType,
                 *,
                 user: User | None = None,
                 error: Exception | None = None,
                 ):
        notify_listeners(
            self._listeners,
            UserListEvent(
                event_type=event_type,
                users=self.users,
                status=self._status,
                user=user,
                error=error,
            )
        )

    def _set_status(self, status: RequestStatus):
        if status == self._status:
            return

        LOGGER.debug('Request status changed from %s to %s', self._status.value, status.value)
        self._status = status
        self._publish(UserListEventType.STATUS_CHANGED)

    async def _fetch(self,
                     description: str,
                     request: Awaitable[list[User]],
                     ) -> FetchResult:
        self._pending += 1
        self._set_status(RequestStatus.IN_FLIGHT)

        error = None
        try:
            users = await request
        except UserListSyncException as e:
            error = e
        except BaseException:
            # Cancelled or crashed: fall back to the last completed outcome
            self._pending -= 1
            if not self._pending:
                self._set_status(self._outcome)
            raise

        self._pending -= 1

        if error is not None:
            self.last_error = error
            self._outcome = RequestStatus.FAILED
            LOGGER.error('Failed to %s: %s', description, error.message)

            self._publish(UserListEventType.FETCH_FAILED, error=error)
            if not self._pending:
                self._set_status(self._outcome)

            return FetchResult(error=error)

        self.last_error = None
        self._outcome = RequestStatus.SUCCESS
        self._collection.replace(users)

        LOGGER.debug('Collection replaced with %d users after %s', len(users), description)

        self._publish(UserListEventType.COLLECTION_REPLACED)
        if not self._pending:
            self._set_status(self._outcome)

        return FetchResult(users=tuple(users))

    async def fetch_all(self) -> FetchResult:
        """
        Fetch all users and replace the collection with them.
        :return: The outcome of the fetch; failures are reported, not raised
        """
        return await self._fetch(
            'fetch all users',
            self._driver.find_all(),
        )

    async def search(self,
                     query: str,
                     ) -> FetchResult:
        """
        Fetch the users matching a query and replace the collection with them.
        :param query: Free text to search for
        :return: The outcome of the fetch; failures are reported, not raised
        """
        return await self._fetch(
            f'search users for {query!r}',
            self._driver.search(query),
        )

    def add(self,
            user: User | NewUser,
            ) -> User:
        """
        Append a user to the end of the collection. IDs are not checked for
        duplicates; a NewUser is given the next free ID.
        :param user: The user to append
        :return: The appended user
        """
        if isinstance(user, NewUser):
            user = user.with_id(self._collection.next_user_id())
        elif not isinstance(user, User):
            raise TypeError(f'Expected User or NewUser, got {type(user).__name__}')

        self._collection.append(user)
        LOGGER.debug('Added user %d locally', user.user_id)
        self._publish(UserListEventType.USER_ADDED, user=user)

        return user

    def edit(self,
             user: User,
             ) -> bool:
        """
        Replace the first user with the same ID, keeping its position.
        :param user: The updated user
        :return: True if a user was replaced, False if no ID matched
        """
        if not isinstance(user, User):
            raise TypeError(f'Expected User, got {type(user).__name__}')

        if not self._collection.replace_first(user):
            LOGGER.debug('No user with ID %d to edit', user.user_id)
            return False

        LOGGER.debug('Edited user %d locally', user.user_id)
        self._publish(UserListEventType.USER_EDITED, user=user)

        return True

    def delete(self,
               user: User | int,
               ) -> bool:
        """
        Remove the first user with the same ID.
        :param user: The user to remove, or its ID
        :return: True if a user was removed, False if no ID matched
        """
        if isinstance(user, User):
            user_id = user.user_id
        elif isinstance(user, int) and not isinstance(user, bool):
            user_id = user
        else:
            raise TypeError(f'Expected User or int, got {type(user).__name__}')

        removed = self._collection.remove_first(user_id)
        if removed is None:
            LOGGER.debug('No user with ID %d to delete', user_id)
            return False

        LOGGER.debug('Deleted user %d locally', user_id)
        self._publish(UserListEventType.USER_DELETED, user=removed)

        return True

    def save(self,
             user: User | NewUser,
             ) -> User | None:
        """
        Store the result of an edit form: a new user is added, an existing
        one is edited.
        :param user: The user from the form
        :return: The stored user, or None if the edited user is not present
        """
        if isinstance(user, NewUser):
            return self.add(user)

        return user if self.edit(user) else None

from userlist_sync.etc.enums import RequestStatus, UserListEventType
from .user import User


class UserListEvent:
    def __init__(self,
                 event_type: UserListEventType,
                 users: tuple[User, ...],
                 status: RequestStatus,
                 *,
                 user: User | None = None,
                 error: Exception | None = None,
                 ):
        """
        A change notification published by a user list client.
        :param event_type: What happened to the collection
        :param users: Snapshot of the collection after the change
        :param status: Request status after the change
        :param user: The affected record, for add, edit and delete events
        :param error: The failure, for failed fetches
        """
        self.event_type = event_type
        self.users = users
        self.status = status
        self.user = user
        self.error = error

    def __repr__(self):
        return f'UserListEvent({self.event_type.value}, users={len(self.users)}, ' \
               f'status={self.status.value})'

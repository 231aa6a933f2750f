from enum import Enum


class RequestStatus(Enum):
    """
    Status of the remote fetches issued by a user list client
    """
    IDLE = 'idle'
    IN_FLIGHT = 'in_flight'
    SUCCESS = 'success'
    FAILED = 'failed'


class UserListEventType(Enum):
    """
    Types of change notifications published by a user list client
    """
    COLLECTION_REPLACED = 'collection_replaced'
    USER_ADDED = 'user_added'
    USER_EDITED = 'user_edited'
    USER_DELETED = 'user_deleted'
    FETCH_FAILED = 'fetch_failed'
    STATUS_CHANGED = 'status_changed'

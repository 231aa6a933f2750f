from .base_model import BaseModel
from .user import UserDetails, User, NewUser, UsersResponse, parse_age
from .user_collection import UserCollection
from .user_list_event import UserListEvent

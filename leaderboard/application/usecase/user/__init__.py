"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .get_user import GetUserRequest, GetUserResponse, GetUserUseCase
from .list_users import ListUsersResponse, ListUsersUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
]

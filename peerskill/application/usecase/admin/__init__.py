"""Administrative use cases."""

from .delete_user import DeleteUserUseCase
from .list_requests import ListRequestsUseCase
from .list_sessions import ListSessionsUseCase
from .list_users import ListUsersUseCase
from .update_points import UpdatePointsUseCase

__all__ = [
    "DeleteUserUseCase",
    "ListRequestsUseCase",
    "ListSessionsUseCase",
    "ListUsersUseCase",
    "UpdatePointsUseCase",
]

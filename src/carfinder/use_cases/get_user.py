from __future__ import annotations

from dataclasses import dataclass

from carfinder.domain.errors import NotFoundError
from carfinder.domain.user import User
from carfinder.ports.user_repository import UserRepository


@dataclass(frozen=True, slots=True)
class GetUserRequest:
    user_id: int


@dataclass(frozen=True, slots=True)
class GetUserResponse:
    user: User


class GetUser:
    """Load the account a session points at."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, request: GetUserRequest) -> GetUserResponse:
        """
        Raises:
            NotFoundError: If the user no longer exists
        """
        user = self._users.get(request.user_id)
        if user is None:
            raise NotFoundError(resource="User", identifier=str(request.user_id))
        return GetUserResponse(user=user)

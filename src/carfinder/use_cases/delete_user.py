from __future__ import annotations

from dataclasses import dataclass
import logging

from carfinder.domain.errors import NotFoundError
from carfinder.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteUserRequest:
    user_id: int


class DeleteUser:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, request: DeleteUserRequest) -> None:
        """
        Delete an account.

        Raises:
            NotFoundError: If the user is already gone
        """
        if not self._users.delete(request.user_id):
            raise NotFoundError(resource="User", identifier=str(request.user_id))
        logger.info("User deleted", extra={"user_id": request.user_id})

from __future__ import annotations

from dataclasses import dataclass
import logging

from carfinder.domain.errors import NotFoundError
from carfinder.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LogoutUserRequest:
    user_id: int


class LogoutUser:
    """
    End every session of a user.

    Session cookies are signed copies kept by the client, so clearing one
    does not stop a replay of it. Rotating the stored nonce does: sessions
    holding the old value no longer authenticate.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, request: LogoutUserRequest) -> None:
        """
        Raises:
            NotFoundError: If the user no longer exists
        """
        if not self._users.revoke_sessions(request.user_id):
            raise NotFoundError(resource="User", identifier=str(request.user_id))
        logger.info("User sessions revoked", extra={"user_id": request.user_id})

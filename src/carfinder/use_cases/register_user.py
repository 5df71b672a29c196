"""Register user use case."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from carfinder.domain.errors import ConflictError
from carfinder.domain.user import NewUser, User
from carfinder.ports.password_hasher import PasswordHasher
from carfinder.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisterUserRequest:
    new_user: NewUser


@dataclass(frozen=True, slots=True)
class RegisterUserResponse:
    user: User


class RegisterUser:
    """
    Use case for creating an account.

    Responsibilities:
    - Validate username and password rules
    - Reject usernames that are already taken
    - Store only the password hash
    """

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = user_repository
        self._hasher = password_hasher

    def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """
        Execute registration.

        Raises:
            ValidationError: If the username is blank or the password too short
            ConflictError: If the username already exists
        """
        new_user = request.new_user
        new_user.validate()

        username = new_user.username.strip()
        if self._users.get_by_username(username) is not None:
            raise ConflictError("Username already exists", field="username")

        user = self._users.add(
            username=username,
            password_hash=self._hasher.hash(new_user.password),
            first_name=new_user.first_name,
            last_name=new_user.last_name,
        )
        logger.info("User registered", extra={"user_id": user.id})
        return RegisterUserResponse(user=user)

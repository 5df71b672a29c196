from __future__ import annotations

from dataclasses import dataclass

from carfinder.domain.errors import UnauthorizedError
from carfinder.domain.user import User
from carfinder.ports.password_hasher import PasswordHasher
from carfinder.ports.user_repository import UserRepository


@dataclass(frozen=True, slots=True)
class AuthenticateUserRequest:
    username: str
    password: str


@dataclass(frozen=True, slots=True)
class AuthenticateUserResponse:
    user: User


class AuthenticateUser:
    """
    Check a username/password pair.

    Unknown usernames and wrong passwords fail with the same error so callers
    cannot tell which usernames exist.
    """

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = user_repository
        self._hasher = password_hasher

    def execute(self, request: AuthenticateUserRequest) -> AuthenticateUserResponse:
        user = self._users.get_by_username(request.username.strip())
        if user is None or not self._hasher.verify(user.password_hash, request.password):
            raise UnauthorizedError("Invalid username or password")
        return AuthenticateUserResponse(user=user)

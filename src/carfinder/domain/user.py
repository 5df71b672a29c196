from __future__ import annotations

from dataclasses import dataclass
import secrets

from carfinder.domain.errors import ValidationError

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True, slots=True)
class User:
    id: int
    username: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
    # Sessions carry a copy; rotating it logs every session of the user out
    session_nonce: str = ""


def new_session_nonce() -> str:
    return secrets.token_hex(16)


@dataclass(frozen=True, slots=True)
class NewUser:
    """Registration data before an id is assigned. The password is still plain text."""

    username: str
    password: str
    first_name: str | None = None
    last_name: str | None = None

    def validate(self) -> None:
        errors = []
        if not self.username.strip():
            errors.append(
                {"field": "username", "message": "Must not be blank", "code": "REQUIRED"}
            )
        if len(self.password) < MIN_PASSWORD_LENGTH:
            errors.append(
                {
                    "field": "password",
                    "message": f"Must be at least {MIN_PASSWORD_LENGTH} characters",
                    "code": "TOO_SHORT",
                }
            )
        if errors:
            raise ValidationError(errors=errors)

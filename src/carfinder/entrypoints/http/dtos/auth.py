from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "jdoe",
                "password": "secret123",
                "firstName": "Jane",
                "lastName": "Doe",
            }
        },
    )

    username: str = Field(max_length=100)
    password: str
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "jdoe", "password": "secret123"}}
    )

    username: str
    password: str


class UserResponseDTO(BaseModel):
    """Public view of an account. Never carries the password hash."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    username: str
    first_name: str | None = None
    last_name: str | None = None

from __future__ import annotations

from carfinder.domain.user import NewUser, User
from carfinder.entrypoints.http.dtos.auth import RegisterRequestDTO, UserResponseDTO


class UserMapper:
    """Maps between account DTOs and domain users."""

    @staticmethod
    def to_new_user(dto: RegisterRequestDTO) -> NewUser:
        return NewUser(
            username=dto.username,
            password=dto.password,
            first_name=dto.first_name,
            last_name=dto.last_name,
        )

    @staticmethod
    def to_response(user: User) -> UserResponseDTO:
        # password_hash stays behind the boundary
        return UserResponseDTO(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
        )

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from carfinder.domain.errors import ConflictError
from carfinder.domain.user import User, new_session_nonce
from carfinder.infra.db.models.user import UserRow
from carfinder.ports.user_repository import UserRepository


class PostgresUserRepository(UserRepository):
    """
    SQLAlchemy implementation of UserRepository.

    The unique index on users.username is the source of truth for duplicates;
    a violation on flush is turned into ConflictError.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserRow, user_id)
        return self._to_domain(row) if row else None

    def get_by_username(self, username: str) -> User | None:
        query = select(UserRow).where(UserRow.username == username)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def add(
        self,
        username: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        row = UserRow(
            username=username,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            session_nonce=new_session_nonce(),
        )
        self._session.add(row)
        try:
            self._session.flush()
        except IntegrityError as exc:
            self._session.rollback()
            raise ConflictError("Username already exists", field="username") from exc
        return self._to_domain(row)

    def revoke_sessions(self, user_id: int) -> bool:
        row = self._session.get(UserRow, user_id)
        if row is None:
            return False
        row.session_nonce = new_session_nonce()
        self._session.flush()
        return True

    def delete(self, user_id: int) -> bool:
        row = self._session.get(UserRow, user_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    @staticmethod
    def _to_domain(row: UserRow) -> User:
        return User(
            id=row.id,
            username=row.username,
            password_hash=row.password_hash,
            first_name=row.first_name,
            last_name=row.last_name,
            session_nonce=row.session_nonce,
        )

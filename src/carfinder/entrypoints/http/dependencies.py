"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache. Shared in-process state
(response cache, upstream client, in-memory stores) lives on app.state.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends, Request

from carfinder.adapters.car_api_catalog_repository import CarApiCatalogRepository
from carfinder.adapters.pbkdf2_password_hasher import Pbkdf2PasswordHasher
from carfinder.adapters.postgres_car_catalog_repository import (
    PostgresCarCatalogRepository,
)
from carfinder.adapters.postgres_user_repository import PostgresUserRepository
from carfinder.domain.errors import NotFoundError, UnauthorizedError
from carfinder.domain.user import User
from carfinder.entrypoints.http.config import (
    SESSION_NONCE_KEY,
    SESSION_USER_KEY,
    CatalogSource,
    catalog_source,
)
from carfinder.infra.db.config import database_configured
from carfinder.infra.db.session import get_session
from carfinder.ports.car_catalog_repository import CarCatalogRepository
from carfinder.ports.password_hasher import PasswordHasher
from carfinder.ports.user_repository import UserRepository
from carfinder.use_cases.authenticate_user import AuthenticateUser
from carfinder.use_cases.delete_user import DeleteUser
from carfinder.use_cases.get_car_by_id import GetCarById
from carfinder.use_cases.get_user import GetUser, GetUserRequest
from carfinder.use_cases.list_car_brands import ListCarBrands
from carfinder.use_cases.list_car_models import ListCarModels
from carfinder.use_cases.list_car_types import ListCarTypes
from carfinder.use_cases.logout_user import LogoutUser
from carfinder.use_cases.register_user import RegisterUser
from carfinder.use_cases.search_car_catalog import SearchCarCatalog


# ==============================================================================
# Repositories
# ==============================================================================


def get_car_catalog_repository(
    request: Request,
) -> Generator[CarCatalogRepository, None, None]:
    """
    Catalog repository for the configured CAR_CATALOG_SOURCE.

    - upstream: the car provider API through the shared client and cache
    - database: SQL storage, one session per request
    - memory: the sample inventory held on app.state
    """
    source = catalog_source()

    if source is CatalogSource.DATABASE:
        with get_session() as session:
            yield PostgresCarCatalogRepository(session=session)
        return

    if source is CatalogSource.MEMORY:
        yield request.app.state.car_catalog
        return

    yield CarApiCatalogRepository(client=request.app.state.car_api_client)


def get_user_repository(request: Request) -> Generator[UserRepository, None, None]:
    """SQL user storage when DATABASE_URL is set, else the in-process store."""
    if database_configured():
        with get_session() as session:
            yield PostgresUserRepository(session=session)
        return

    yield request.app.state.user_repository


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return Pbkdf2PasswordHasher()


# ==============================================================================
# Use cases
# ==============================================================================


def get_search_catalog_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> SearchCarCatalog:
    """
    Factory function that returns a configured SearchCarCatalog use case.

    Called per-request, so each request gets a fresh use case bound to the
    repository for the configured catalog source.
    """
    return SearchCarCatalog(car_catalog_repository=repository)


def get_car_by_id_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> GetCarById:
    return GetCarById(car_catalog_repository=repository)


def get_list_brands_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> ListCarBrands:
    return ListCarBrands(car_catalog_repository=repository)


def get_list_types_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> ListCarTypes:
    return ListCarTypes(car_catalog_repository=repository)


def get_list_models_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> ListCarModels:
    return ListCarModels(car_catalog_repository=repository)


def get_register_user_use_case(
    users: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> RegisterUser:
    return RegisterUser(user_repository=users, password_hasher=hasher)


def get_authenticate_user_use_case(
    users: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthenticateUser:
    return AuthenticateUser(user_repository=users, password_hasher=hasher)


def get_user_use_case(users: UserRepository = Depends(get_user_repository)) -> GetUser:
    return GetUser(user_repository=users)


def get_delete_user_use_case(users: UserRepository = Depends(get_user_repository)) -> DeleteUser:
    return DeleteUser(user_repository=users)


def get_logout_user_use_case(users: UserRepository = Depends(get_user_repository)) -> LogoutUser:
    return LogoutUser(user_repository=users)


# ==============================================================================
# Session
# ==============================================================================


def start_session(request: Request, user: User) -> None:
    request.session[SESSION_USER_KEY] = user.id
    request.session[SESSION_NONCE_KEY] = user.session_nonce


def get_session_user(
    request: Request,
    use_case: GetUser = Depends(get_user_use_case),
) -> User | None:
    """
    The user the session cookie points at, or None.

    A session whose user is gone, or whose nonce was revoked by a logout, is
    cleared.
    """
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None

    try:
        user = use_case.execute(GetUserRequest(user_id=int(user_id))).user
    except NotFoundError:
        request.session.clear()
        return None

    if request.session.get(SESSION_NONCE_KEY) != user.session_nonce:
        request.session.clear()
        return None

    return user


def get_current_user(user: User | None = Depends(get_session_user)) -> User:
    """
    Raises:
        UnauthorizedError: If there is no valid session
    """
    if user is None:
        raise UnauthorizedError("Not authenticated")
    return user

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from carfinder.domain.user import User
from carfinder.entrypoints.http.dependencies import (
    get_authenticate_user_use_case,
    get_current_user,
    get_delete_user_use_case,
    get_logout_user_use_case,
    get_register_user_use_case,
    get_session_user,
    start_session,
)
from carfinder.entrypoints.http.dtos.auth import (
    LoginRequestDTO,
    RegisterRequestDTO,
    UserResponseDTO,
)
from carfinder.entrypoints.http.error_responses import ErrorResponse
from carfinder.entrypoints.http.mappers.user_mapper import UserMapper
from carfinder.use_cases.authenticate_user import AuthenticateUser, AuthenticateUserRequest
from carfinder.use_cases.delete_user import DeleteUser, DeleteUserRequest
from carfinder.use_cases.logout_user import LogoutUser, LogoutUserRequest
from carfinder.use_cases.register_user import RegisterUser, RegisterUserRequest

router = APIRouter(tags=["Accounts"])

_UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Not authenticated"}}


@router.post(
    "/register",
    response_model=UserResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account and log in",
    responses={
        409: {"model": ErrorResponse, "description": "Username already exists"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def register(
    body: RegisterRequestDTO,
    request: Request,
    use_case: RegisterUser = Depends(get_register_user_use_case),
) -> UserResponseDTO:
    result = use_case.execute(RegisterUserRequest(new_user=UserMapper.to_new_user(body)))
    start_session(request, result.user)
    return UserMapper.to_response(result.user)


@router.post(
    "/login",
    response_model=UserResponseDTO,
    summary="Log in",
    responses=_UNAUTHORIZED,
)
def login(
    body: LoginRequestDTO,
    request: Request,
    use_case: AuthenticateUser = Depends(get_authenticate_user_use_case),
) -> UserResponseDTO:
    result = use_case.execute(
        AuthenticateUserRequest(username=body.username, password=body.password)
    )
    start_session(request, result.user)
    return UserMapper.to_response(result.user)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Log out",
    description="Ends every session of the user, including copies of the cookie kept elsewhere.",
)
def logout(
    request: Request,
    user: User | None = Depends(get_session_user),
    use_case: LogoutUser = Depends(get_logout_user_use_case),
) -> Response:
    if user is not None:
        use_case.execute(LogoutUserRequest(user_id=user.id))
    request.session.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/user",
    response_model=UserResponseDTO,
    summary="Current user",
    responses=_UNAUTHORIZED,
)
def current_user(user: User = Depends(get_current_user)) -> UserResponseDTO:
    return UserMapper.to_response(user)


@router.delete(
    "/user",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete the current account",
    responses=_UNAUTHORIZED,
)
def delete_current_user(
    request: Request,
    user: User = Depends(get_current_user),
    use_case: DeleteUser = Depends(get_delete_user_use_case),
) -> Response:
    use_case.execute(DeleteUserRequest(user_id=user.id))
    request.session.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from leaderboard.application.usecase.user import (
    CreateUserRequest,
    CreateUserResponse,
    CreateUserUseCase,
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
    ListUsersResponse,
    ListUsersUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(BaseModel):
    """API request for registering a user.

    Fields are optional here so that a missing field is reported with the
    registration message instead of a generic validation error.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """Get the leaderboard: active users ranked by total points.

    Returns:
        At most the configured number of ranked users
    """
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=GetUserResponse)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> GetUserResponse:
    """Get a single user by ID.

    Args:
        user_id: User UUID
        get_user_use_case: Get user use case from DI

    Returns:
        Public user information
    """
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.post(
    "", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED
)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> CreateUserResponse:
    """Register a new user with zero points.

    Args:
        request: Name, email and password
        create_user_use_case: Create user use case from DI

    Returns:
        The created user
    """
    return await create_user_use_case.execute(
        CreateUserRequest(
            name=request.name,
            email=request.email,
            password=request.password,
        )
    )

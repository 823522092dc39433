"""Create user use case."""

from pydantic import BaseModel

from leaderboard.application.usecase.base import BaseUseCase, ResponseModel
from leaderboard.domain.service import UserService


class CreateUserRequest(BaseModel):
    """Create user request.

    Fields are optional here so that missing values are reported by the
    domain as invalid input rather than by schema validation.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None


class CreatedUserInfo(ResponseModel):
    """Newly created user."""

    id: str
    name: str
    points: int


class CreateUserResponse(ResponseModel):
    """Create user response."""

    message: str
    user: CreatedUserInfo


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute registration flow.

        Raises:
            InvalidInputError: If a field is missing or malformed
            ConflictError: If the email or name is taken
        """
        user = await self.user_service.register(
            name=request.name or "",
            email=request.email or "",
            password=request.password or "",
        )

        return CreateUserResponse(
            message="User created successfully",
            user=CreatedUserInfo(
                id=str(user.id), name=user.name.root, points=user.total_points
            ),
        )

"""User domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from leaderboard.domain.error import ConflictError, InvalidInputError, NotFoundError
from leaderboard.domain.model import User
from leaderboard.domain.repository import UserRepository
from leaderboard.domain.value import UserId, UserName

from .base import Service
from .password_hasher import PasswordHasher


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_hasher: Credential hasher supplied by the auth collaborator
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(self, name: str, email: str, password: str) -> User:
        """Register a new user with zero points.

        Email uniqueness is checked before name uniqueness, so a request
        colliding on both reports the email.

        Args:
            name: Display name
            email: Email address
            password: Plain-text password, hashed before storage

        Returns:
            The created user

        Raises:
            InvalidInputError: If a field is missing or malformed
            ConflictError: If the email or name is already taken
        """
        if not (name or "").strip() or not (email or "").strip() or not password:
            raise InvalidInputError("Please provide name, email, and password")

        try:
            user_name = UserName(name)
        except ValidationError as e:
            raise InvalidInputError(e.errors()[0]["msg"])

        normalized_email = email.strip().lower()
        if "@" not in normalized_email:
            raise InvalidInputError("Please provide a valid email")

        with logfire.span("user_service.register", name=user_name.root):
            if await self.user_repository.find_by_email(normalized_email):
                logfire.warn("Email already registered", email=normalized_email)
                raise ConflictError("Email already registered")

            if await self.user_repository.find_by_name(user_name):
                logfire.warn("Username already taken", name=user_name.root)
                raise ConflictError("Username already taken")

            user = User(
                id=UserId(uuid4()),
                name=user_name,
                email=normalized_email,
                password_hash=self.password_hasher.hash(password),
                total_points=0,
                is_active=True,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent registration
                logfire.warn("Duplicate registration", name=user_name.root)
                raise ConflictError("Email or username already registered")

            logfire.info("User registered", user_id=str(saved.id), name=user_name.root)
            return saved

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from signup_api.entities.user import User
from signup_api.repositories.user_repository import UserRepository

logger = logging.getLogger("signup_api.sign_up")


class UserAlreadyExistsError(Exception):
    def __init__(self, email: str):
        super().__init__("User already exists.")
        self.email = email


@dataclass(frozen=True)
class SignUpRequest:
    name: str
    email: str
    password: str


class ISignUpUseCase(ABC):
    @abstractmethod
    async def handle(self, request: SignUpRequest) -> User: ...


class SignUpUseCase(ISignUpUseCase):
    """Register a new user unless one with the same email already exists."""

    def __init__(self, user_repository: UserRepository):
        self._users = user_repository
        # Serializes lookup + create so overlapping requests can't both see "not found".
        self._lock = asyncio.Lock()

    async def handle(self, request: SignUpRequest) -> User:
        async with self._lock:
            existing = await self._users.find_by_email(request.email)
            if existing is not None:
                logger.warning("Sign-up rejected, email already registered", extra={"user_id": existing.id})
                raise UserAlreadyExistsError(request.email)

            user = User({"name": request.name, "email": request.email, "password": request.password})
            await self._users.create(user)

        logger.info("User signed up", extra={"user_id": user.id})
        return user

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from signup_api.entities.user import User


class UserRepository(ABC):
    """Storage capability for users.

    Implementations promise only that a created user is visible to later
    calls in the same process.
    """

    @abstractmethod
    async def create(self, user: User) -> User: ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]: ...

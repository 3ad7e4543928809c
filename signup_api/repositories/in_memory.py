from __future__ import annotations

import threading
from typing import List, Optional

from signup_api.entities.user import User
from signup_api.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """List-backed user store.

    Storage semantics:
    - Stored only in the API process memory (cleared on restart).
    - Insertion ordered; users are never updated or removed.
    - Email matching is exact and case-sensitive.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: List[User] = []

    async def create(self, user: User) -> User:
        with self._lock:
            self._users.append(user)
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for u in self._users:
                if u.email == email:
                    return u
        return None

from __future__ import annotations

from typing import Optional

from signup_api.repositories.in_memory import InMemoryUserRepository
from signup_api.repositories.user_repository import UserRepository
from signup_api.use_cases.sign_up import SignUpUseCase


class SignUpFactory:
    @staticmethod
    def create(repository: Optional[UserRepository] = None) -> SignUpUseCase:
        # The repository built here is the process-wide user store.
        return SignUpUseCase(repository if repository is not None else InMemoryUserRepository())

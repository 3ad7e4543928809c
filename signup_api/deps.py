from __future__ import annotations

from fastapi import Depends

from signup_api.controller import SignUpController
from signup_api.factories import SignUpFactory
from signup_api.settings import Settings, get_settings
from signup_api.use_cases.sign_up import ISignUpUseCase

# Built once per process: the repository inside it is the user store for the
# lifetime of the server.
_sign_up_use_case = SignUpFactory.create()


def get_settings_dep() -> Settings:
    """FastAPI dependency for settings.

    Delegates to signup_api.settings.get_settings (canonical constructor).
    """
    return get_settings()


def get_sign_up_use_case() -> ISignUpUseCase:
    return _sign_up_use_case


def get_sign_up_controller(
    use_case: ISignUpUseCase = Depends(get_sign_up_use_case),
    settings: Settings = Depends(get_settings_dep),
) -> SignUpController:
    return SignUpController(use_case, conflict_status=settings.signup_conflict_status)

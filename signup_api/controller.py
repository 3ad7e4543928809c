from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from signup_api.models import ErrorResponse
from signup_api.use_cases.sign_up import ISignUpUseCase, SignUpRequest, UserAlreadyExistsError

logger = logging.getLogger("signup_api.controller")

REQUIRED_FIELDS = ("name", "email", "password")


class SignUpController:
    """HTTP adapter for the sign-up use case.

    Only checks that the required fields are present (and non-empty); every
    other decision belongs to the use case. Errors never escape ``handle``.
    """

    def __init__(self, sign_up_use_case: ISignUpUseCase, *, conflict_status: int = 500):
        self._sign_up = sign_up_use_case
        self._conflict_status = conflict_status

    async def handle(self, request: Request) -> JSONResponse:
        try:
            try:
                body = await request.json()
            except ValueError:
                # Empty or malformed JSON counts as no fields at all.
                body = None
            data = body if isinstance(body, dict) else {}

            for field in REQUIRED_FIELDS:
                if not data.get(field):
                    return _error(400, f"Field {field} params is required.", "Bad request")

            user = await self._sign_up.handle(
                SignUpRequest(name=data["name"], email=data["email"], password=data["password"])
            )

            return JSONResponse({"message": "User created successfully", "user": user.to_dict()}, status_code=201)
        except UserAlreadyExistsError as e:
            if self._conflict_status == 409:
                return _error(409, "User already exists", str(e))
            return _error(500, "Error creating user", str(e))
        except Exception as e:
            logger.exception("Unexpected error during sign-up")
            return _error(500, "Error creating user", str(e))


def _error(status_code: int, message: str, error: Any) -> JSONResponse:
    return JSONResponse(ErrorResponse(message=message, error=error).model_dump(), status_code=status_code)

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from signup_api.controller import SignUpController
from signup_api.deps import get_sign_up_controller
from signup_api.models import ErrorResponse, SignUpResponse

router = APIRouter(tags=["signup"])


@router.post(
    "/signup",
    status_code=201,
    response_model=SignUpResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def sign_up_endpoint(
    request: Request,
    controller: SignUpController = Depends(get_sign_up_controller),
):
    """Create a user.

    Accepts:
      {"name": "...", "email": "...", "password": "..."}

    The body is read by the controller, so malformed JSON gets the same 400 as
    an empty object.
    """
    return await controller.handle(request)

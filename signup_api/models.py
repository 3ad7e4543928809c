from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    # Returned as submitted; hashing is out of scope for this service.
    password: str
    role: Optional[str] = None


class SignUpResponse(BaseModel):
    message: str
    user: UserOut


class ErrorResponse(BaseModel):
    message: str
    error: Any

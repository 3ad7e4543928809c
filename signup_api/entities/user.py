from __future__ import annotations

from typing import Any, Optional, TypedDict

from signup_api.entities.base import BaseEntity


class UserProps(TypedDict):
    name: str
    email: str
    password: str


class User(BaseEntity[UserProps]):
    def __init__(self, props: UserProps, id: Optional[str] = None):
        super().__init__(props, id)

    @property
    def name(self) -> str:
        return self.props["name"]

    @property
    def email(self) -> str:
        return self.props["email"]

    @property
    def password(self) -> str:
        return self.props["password"]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email, "password": self.password}

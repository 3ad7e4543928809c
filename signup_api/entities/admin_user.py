from __future__ import annotations

from typing import Any, Optional

from signup_api.entities.user import User, UserProps


class AdminUserProps(UserProps):
    role: str


class AdminUser(User):
    """A User with a role. Usable anywhere a User is expected."""

    def __init__(self, props: AdminUserProps, id: Optional[str] = None):
        super().__init__(props, id)
        self._role = props["role"]

    @property
    def role(self) -> str:
        return self._role

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["role"] = self._role
        return out

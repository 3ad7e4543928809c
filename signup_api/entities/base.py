from __future__ import annotations

import uuid
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar

T = TypeVar("T", bound=Mapping[str, Any])


def generate_id() -> str:
    return str(uuid.uuid4())


class BaseEntity(Generic[T]):
    """Identity wrapper shared by every entity.

    The property bag is copied on construction and exposed read-only, so
    neither the caller's dict nor ``entity.props`` can change it later.
    """

    def __init__(self, props: T, id: Optional[str] = None):
        # Empty ids are replaced too.
        self._id = id or generate_id()
        self._props: Mapping[str, Any] = MappingProxyType(dict(props))

    @property
    def id(self) -> str:
        return self._id

    @property
    def props(self) -> Mapping[str, Any]:
        return self._props

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity) or type(other) is not type(self):
            return NotImplemented
        return other._id == self._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return "%s(id=%r)" % (type(self).__name__, self._id)

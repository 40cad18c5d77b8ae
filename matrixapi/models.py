"""
Typed structures decoded from Synapse admin API responses.

Decoding is structural only: required keys must be present with the right
JSON type, unknown keys are dropped. Failures raise ValueError, which the
HTTP client turns into a TransportError.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


def _require(data: Dict[str, Any], key: str, types: tuple) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    # bool is an int subclass; keep it out of plain integer fields
    if isinstance(value, bool) and bool not in types:
        raise ValueError(f"invalid type for field `{key}`")
    if not isinstance(value, types):
        raise ValueError(f"invalid type for field `{key}`")
    return value


def _optional(data: Dict[str, Any], key: str, types: tuple) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, types):
        raise ValueError(f"invalid type for field `{key}`")
    return value


def _as_object(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


@dataclass
class APIErrorResponse:
    """Standard Matrix error body."""

    errcode: str
    error: str
    soft_logout: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Any) -> "APIErrorResponse":
        data = _as_object(data)
        return cls(
            errcode=_require(data, "errcode", (str,)),
            error=_require(data, "error", (str,)),
            soft_logout=_optional(data, "soft_logout", (bool,)),
        )


@dataclass
class ServerVersion:
    """Response of /_synapse/admin/v1/server_version."""

    versions: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "ServerVersion":
        data = _as_object(data)
        for key in data:
            _require(data, key, (str,))
        return cls(versions=dict(data))

    @property
    def server_version(self) -> Optional[str]:
        return self.versions.get("server_version")

    @property
    def python_version(self) -> Optional[str]:
        return self.versions.get("python_version")

    def to_dict(self) -> Dict[str, str]:
        return dict(self.versions)


@dataclass
class User:
    """A homeserver account as reported by the admin API."""

    name: str
    displayname: Optional[str] = None
    admin: int = 0
    is_guest: int = 0
    deactivated: int = 0
    user_type: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        data = _as_object(data)
        # older Synapse releases send 0/1, newer ones send booleans
        flags = (int, bool)
        return cls(
            name=_require(data, "name", (str,)),
            displayname=_optional(data, "displayname", (str,)),
            admin=_require(data, "admin", flags),
            is_guest=_require(data, "is_guest", flags),
            deactivated=_require(data, "deactivated", flags),
            user_type=_optional(data, "user_type", (str,)),
            avatar_url=_optional(data, "avatar_url", (str,)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class UserList:
    """First page of /_synapse/admin/v2/users."""

    total: int
    users: List[User] = field(default_factory=list)
    next_token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "UserList":
        data = _as_object(data)
        users = _require(data, "users", (list,))
        next_token = data.get("next_token")
        return cls(
            total=_require(data, "total", (int,)),
            users=[User.from_dict(user) for user in users],
            next_token=str(next_token) if next_token is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "users": [user.to_dict() for user in self.users],
        }

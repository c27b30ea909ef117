from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Staff account (domain entity).

    Note: plain data object, no DB access. ``password_hash`` never leaves the
    service layer.
    """

    id: int
    username: str
    password_hash: str
    name: str
    email: str
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def public_view(self) -> dict:
        return {"id": self.id, "username": self.username, "name": self.name, "email": self.email, "role": self.role.value}

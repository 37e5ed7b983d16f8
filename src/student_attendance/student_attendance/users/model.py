from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AuthUser:
    """Identity record: the root every other user row depends on."""

    user_id: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Profile:
    """Student profile, one-to-one with AuthUser (same id)."""

    user_id: str
    name: str
    email: str
    branch: str
    batch: str
    roll_number: str

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0] if self.name else "Student"

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "branch": self.branch,
            "batch": self.batch,
            "roll_number": self.roll_number,
        }


@dataclass(frozen=True)
class SessionUser:
    """What we keep in the auth context / Flask session after sign-in."""

    user_id: str
    email: str

    def to_session(self) -> dict:
        return {"user_id": self.user_id, "email": self.email}

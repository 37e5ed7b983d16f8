from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import AuthUser, Profile


class UserRepository(Protocol):
    """Identity store (auth_users).

    Note: services depend on these interfaces, not on a concrete DB.
    """

    def get_by_id(self, user_id: str) -> Optional[AuthUser]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[AuthUser]:
        raise NotImplementedError

    def create_user(self, *, user_id: str, email: str, password_hash: str) -> str:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> bool:
        raise NotImplementedError


class ProfileRepository(Protocol):
    def get_by_id(self, user_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def create_profile(self, profile: Profile) -> None:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> int:
        raise NotImplementedError


class RoleRepository(Protocol):
    def add_role(self, *, user_id: str, role: Role) -> None:
        raise NotImplementedError

    def list_roles(self, user_id: str) -> Sequence[Role]:
        raise NotImplementedError

    def delete_for_user(self, user_id: str) -> int:
        raise NotImplementedError

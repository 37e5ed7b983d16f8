from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_choice, require_min_length, require_non_empty
from ..core.constants import (
    BATCH_OPTIONS,
    BRANCH_OPTIONS,
    DEFAULT_TOKEN_TTL_MINUTES,
    MIN_PASSWORD_LENGTH,
)
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import Profile, SessionUser
from .repository import ProfileRepository, RoleRepository, UserRepository

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = "HS256"


class AuthService:
    """Use cases: sign up, sign in, bearer token issue/resolve."""

    def __init__(
        self,
        users: UserRepository,
        profiles: ProfileRepository,
        roles: RoleRepository,
        *,
        secret_key: str,
        token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES,
    ):
        self._users = users
        self._profiles = profiles
        self._roles = roles
        self._secret_key = secret_key
        self._token_ttl = timedelta(minutes=int(token_ttl_minutes))

    def sign_up(
        self,
        *,
        email: str,
        password: str,
        name: str,
        roll_number: str,
        branch: str,
        batch: str,
    ) -> SessionUser:
        email = require_non_empty(email, "Email").lower()
        if "@" not in email:
            raise ValidationError("Email is not valid")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        name = require_non_empty(name, "Name")
        roll_number = require_non_empty(roll_number, "Roll number")
        branch = require_choice(require_non_empty(branch, "Branch"), "Branch", BRANCH_OPTIONS)
        batch = require_choice(require_non_empty(batch, "Batch"), "Batch", BATCH_OPTIONS[branch])

        if self._users.get_by_email(email):
            raise ValidationError("User already registered")

        user_id = str(uuid.uuid4())
        self._users.create_user(user_id=user_id, email=email, password_hash=generate_password_hash(password))
        self._profiles.create_profile(
            Profile(
                user_id=user_id,
                name=name,
                email=email,
                branch=branch,
                batch=batch,
                roll_number=roll_number,
            )
        )
        self._roles.add_role(user_id=user_id, role=Role.STUDENT)

        logger.info("Signed up user %s (%s/%s)", user_id, branch, batch)
        return SessionUser(user_id=user_id, email=email)

    def sign_in(self, email: str, password: str) -> SessionUser:
        if not isinstance(email, str) or not isinstance(password, str):
            raise ValidationError("Please fill in all fields")
        email = email.strip().lower()
        if not email or not password:
            raise ValidationError("Please fill in all fields")

        user = self._users.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid login credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid login credentials")

        return SessionUser(user_id=user.user_id, email=user.email)

    def issue_token(self, user: SessionUser, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": user.user_id,
            "email": user.email,
            "iat": now,
            "exp": now + self._token_ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=TOKEN_ALGORITHM)

    def resolve_token(self, token: str) -> SessionUser:
        """Decode a bearer token and make sure the identity still exists."""

        try:
            data = jwt.decode(token, self._secret_key, algorithms=[TOKEN_ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Unauthorized")

        user = self._users.get_by_id(str(data.get("sub", "")))
        if not user:
            raise AuthenticationError("Unauthorized")
        return SessionUser(user_id=user.user_id, email=user.email)


class ProfileService:
    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def get_profile(self, user_id: str) -> Profile:
        profile = self._profiles.get_by_id(user_id)
        if not profile:
            raise NotFoundError("Profile not found")
        return profile

    def find_profile(self, user_id: str) -> Optional[Profile]:
        return self._profiles.get_by_id(user_id)

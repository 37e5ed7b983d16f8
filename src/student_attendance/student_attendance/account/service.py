from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from ..attendance.repository import AttendanceRepository
from ..core.exceptions import AccountDeletionError
from ..holidays.repository import HolidayRepository
from ..users.repository import ProfileRepository, RoleRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletionStep:
    name: str
    failure_message: str
    action: Callable[[str], object]


class AccountDeletionService:
    """Remove every row a user owns, identity last.

    Steps run one after another, each committing on its own. The first failure
    stops the sequence; completed steps stay deleted.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        holidays: HolidayRepository,
        roles: RoleRepository,
        profiles: ProfileRepository,
        users: UserRepository,
    ):
        self._steps = (
            DeletionStep("attendance_record", "Failed to delete attendance records", attendance.delete_for_user),
            DeletionStep("calendar", "Failed to delete calendar entries", holidays.delete_for_user),
            DeletionStep("user_roles", "Failed to delete user roles", roles.delete_for_user),
            DeletionStep("profiles", "Failed to delete profile", profiles.delete_by_id),
            DeletionStep("auth_users", "Failed to delete user account", users.delete_by_id),
        )

    @property
    def steps(self) -> Sequence[DeletionStep]:
        return self._steps

    def delete_account(self, user_id: str) -> None:
        for step in self._steps:
            try:
                step.action(user_id)
            except Exception as e:
                logger.error("Error deleting %s for %s: %s", step.name, user_id, e)
                raise AccountDeletionError(step.failure_message, step=step.name) from e
            logger.debug("Deleted %s for %s", step.name, user_id)

        logger.info("Account %s deleted", user_id)

from __future__ import annotations

import pytest

from student_attendance.common.responses import domain_error
from student_attendance.core.exceptions import (
    AccountDeletionError,
    AuthenticationError,
    DomainError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error, status",
    [
        (ValidationError("Subject is required"), 400),
        (AuthenticationError("Invalid login credentials"), 401),
        (NotFoundError("Profile not found"), 404),
        (DomainError("Something went wrong"), 400),
    ],
)
def test_domain_error_status(app, error, status):
    with app.app_context():
        resp, code = domain_error(error)

    assert code == status
    assert resp.get_json() == {"success": False, "message": str(error)}


def test_account_deletion_error_keeps_failed_step():
    e = AccountDeletionError("Failed to delete profile", step="profile")
    assert (str(e), e.step) == ("Failed to delete profile", "profile")

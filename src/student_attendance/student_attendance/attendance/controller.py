from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import domain_error, fail, ok
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError
from ..users.context import current_auth, login_required
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


def _marked_message(record: AttendanceRecord) -> str:
    text = {
        AttendanceStatus.CANCELLED: "marked as cancelled",
        AttendanceStatus.PRESENT: "marked present",
        AttendanceStatus.ABSENT: "marked absent",
    }[record.status]
    suffix = f" (swapped to {record.swapped_to})" if record.swapped_to else ""
    return f"Class {text}{suffix}"


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_summary")
    @login_required
    def attendance_summary():
        try:
            summary = container.attendance_service.summary(current_auth().user_id)
            return ok({"summary": summary.to_dict()})
        except Exception:
            logger.exception("Failed to load attendance")
            return fail("Failed to load data", 500)

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    @login_required
    def mark_attendance():
        data = request.get_json(silent=True) or {}
        try:
            if data.get("swapped_to") is not None:
                record = container.attendance_service.mark_swapped(
                    current_auth().user_id,
                    subject=data.get("subject", ""),
                    swapped_to=data.get("swapped_to"),
                    status=data.get("status"),
                )
            else:
                record = container.attendance_service.mark(
                    current_auth().user_id,
                    subject=data.get("subject", ""),
                    status=data.get("status"),
                )
            return ok({"message": _marked_message(record), "record": record.to_dict()})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to mark attendance")
            return fail("Failed to mark attendance", 500)

    @app.route("/api/attendance/gesture", methods=["POST"], endpoint="attendance_gesture")
    @login_required
    def attendance_gesture():
        data = request.get_json(silent=True) or {}
        try:
            outcome = container.attendance_service.apply_gesture(
                current_auth().user_id,
                subject=data.get("subject", ""),
                gesture=data.get("gesture", ""),
            )
            return ok({"outcome": outcome.to_dict()})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to apply gesture")
            return fail("Failed to mark attendance", 500)

    @app.route("/api/attendance/<path:subject>", methods=["PUT"], endpoint="edit_attendance")
    @login_required
    def edit_attendance(subject: str):
        data = request.get_json(silent=True) or {}
        try:
            records = container.attendance_service.edit_counts(
                current_auth().user_id,
                subject=subject,
                attended=data.get("attended"),
                total=data.get("total"),
            )
            return ok({"message": "Attendance updated", "written": len(records)})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to edit attendance for %s", subject)
            return fail("Failed to update attendance", 500)

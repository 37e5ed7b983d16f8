from __future__ import annotations

import logging

from flask import Flask

from ..common.responses import ok
from ..container import Container
from ..core.constants import TEACHING_DAYS
from ..users.context import current_auth, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timetable", methods=["GET"], endpoint="timetable")
    @login_required
    def timetable():
        user_id = current_auth().user_id
        try:
            week = container.timetable_service.weekly(user_id)
        except Exception:
            logger.exception("Failed to fetch timetable for %s", user_id)
            week = {day: [] for day in TEACHING_DAYS}

        return ok(
            {
                "days": [
                    {"day": day, "classes": [c.to_dict() for c in week.get(day, [])]}
                    for day in TEACHING_DAYS
                ]
            }
        )

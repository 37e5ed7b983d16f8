from __future__ import annotations

import logging

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.responses import domain_error, fail, ok
from ..container import Container
from ..core.exceptions import DomainError
from ..users.context import current_auth, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar", methods=["GET"], endpoint="calendar")
    @login_required
    def calendar():
        user_id = current_auth().user_id
        today = today_local()
        try:
            selected = parse_iso_date(request.args["date"]) if request.args.get("date") else today
        except ValueError:
            return fail("date must be YYYY-MM-DD", 400)

        svc = container.holiday_service
        try:
            holidays = svc.list_for_user(user_id)
            on_selected = svc.for_date(user_id, selected)
            upcoming = svc.upcoming(user_id, today=today)
        except Exception:
            logger.exception("Failed to fetch holidays for %s", user_id)
            holidays, on_selected, upcoming = [], [], []

        return ok(
            {
                "holidays": [h.to_dict() for h in holidays],
                "selected_date": selected.strftime("%Y-%m-%d"),
                "selected": [h.to_dict() for h in on_selected],
                "upcoming": [h.to_dict() for h in upcoming],
            }
        )

    @app.route("/api/calendar", methods=["POST"], endpoint="add_holiday")
    @login_required
    def add_holiday():
        data = request.get_json(silent=True) or {}
        try:
            on_date = parse_iso_date(data["date"]) if data.get("date") else None
        except (TypeError, ValueError):
            return fail("date must be YYYY-MM-DD", 400)

        try:
            holiday_id = container.holiday_service.add_personal(
                user_id=current_auth().user_id,
                on_date=on_date,
                name=data.get("name", ""),
            )
            return ok({"id": holiday_id, "message": "Holiday added"}, status=201)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to add holiday")
            return fail("Failed to add holiday", 500)

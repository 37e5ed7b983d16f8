from __future__ import annotations

from flask import Flask

from ..common.responses import ok
from ..container import Container
from ..users.context import current_auth, login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        data = container.dashboard_service.load(current_auth().user_id)
        return ok({"dashboard": data.to_dict()})

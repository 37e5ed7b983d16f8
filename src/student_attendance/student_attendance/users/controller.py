from __future__ import annotations

import logging

from flask import Flask, redirect, request, url_for

from ..common.responses import domain_error, fail, ok
from ..container import Container
from ..core.constants import BATCH_OPTIONS, BRANCH_OPTIONS
from ..core.exceptions import DomainError
from .context import current_auth, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        if current_auth().is_authenticated:
            return redirect(url_for("dashboard"))
        return ok(
            {
                "app": "JSS Attendance",
                "features": ["Track Progress", "View Calendar", "Manage Classes"],
                "next": url_for("auth_page"),
            }
        )

    @app.route("/auth", methods=["GET"], endpoint="auth_page")
    def auth_page():
        return ok(
            {
                "branches": list(BRANCH_OPTIONS),
                "batches": {branch: list(batches) for branch, batches in BATCH_OPTIONS.items()},
            }
        )

    @app.route("/api/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = request.get_json(silent=True) or {}
        try:
            user = container.auth_service.sign_up(
                email=data.get("email", ""),
                password=data.get("password", ""),
                name=data.get("name", ""),
                roll_number=data.get("roll_number", ""),
                branch=data.get("branch", ""),
                batch=data.get("batch", ""),
            )
            current_auth().sign_in(user)
            token = container.auth_service.issue_token(user)
            return ok(
                {
                    "message": "Account created! Logging you in...",
                    "user_id": user.user_id,
                    "access_token": token,
                },
                status=201,
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Sign up failed")
            return fail("Failed to sign up", 500)

    @app.route("/api/auth/signin", methods=["POST"], endpoint="signin")
    def signin():
        data = request.get_json(silent=True) or {}
        try:
            user = container.auth_service.sign_in(data.get("email", ""), data.get("password", ""))
            current_auth().sign_in(user)
            token = container.auth_service.issue_token(user)
            return ok(
                {
                    "message": "Logged in successfully!",
                    "user_id": user.user_id,
                    "access_token": token,
                }
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Sign in failed")
            return fail("Failed to login", 500)

    @app.route("/api/auth/signout", methods=["POST"], endpoint="signout")
    def signout():
        current_auth().sign_out()
        return ok({"message": "Logged out successfully"})

    @app.route("/api/profile", methods=["GET"], endpoint="profile")
    @login_required
    def profile():
        try:
            p = container.profile_service.get_profile(current_auth().user_id)
            return ok({"profile": p.to_dict()})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to load profile")
            return fail("Failed to load profile", 500)

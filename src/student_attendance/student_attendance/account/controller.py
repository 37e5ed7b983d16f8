from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import AccountDeletionError, AuthenticationError
from ..users.context import bearer_token, current_auth

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/functions/v1/delete-user-account", methods=["POST"], endpoint="delete_account")
    @app.route("/api/account/delete", methods=["POST", "DELETE"], endpoint="delete_account")
    def delete_account():
        """Delete the caller's data and identity. Authorized by bearer token only."""

        token = bearer_token()
        if token is None:
            return jsonify({"error": "No authorization header"}), 401

        try:
            user = container.auth_service.resolve_token(token)
        except AuthenticationError:
            return jsonify({"error": "Unauthorized"}), 401

        try:
            container.account_deletion_service.delete_account(user.user_id)
        except AccountDeletionError as e:
            logger.error("Delete account error (%s): %s", e.step, e)
            return jsonify({"error": str(e)}), 500
        except Exception:
            logger.exception("Delete account error")
            return jsonify({"error": "Failed to delete account"}), 500

        auth = current_auth()
        if auth.user is not None and auth.user.user_id == user.user_id:
            auth.sign_out()

        return jsonify({"success": True, "message": "Account deleted successfully"}), 200

from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, List, Optional

from flask import Flask, g, jsonify, request, session, url_for

from ..core.exceptions import AuthenticationError
from .model import SessionUser

logger = logging.getLogger(__name__)

AuthListener = Callable[[Optional[SessionUser]], None]


class AuthContext:
    """Holds the signed-in user for one request and notifies subscribers on change.

    Created per request from the Flask session (or a bearer token), never shared
    between requests.
    """

    def __init__(self, user: Optional[SessionUser] = None):
        self._user = user
        self._listeners: List[AuthListener] = []

    @property
    def user(self) -> Optional[SessionUser]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def user_id(self) -> str:
        if self._user is None:
            raise AuthenticationError("Not signed in")
        return self._user.user_id

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, user: SessionUser) -> None:
        self._user = user
        self._notify()

    def sign_out(self) -> None:
        self._user = None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._user)


def _user_from_session() -> Optional[SessionUser]:
    user_id = session.get("user_id")
    if not user_id:
        return None
    return SessionUser(user_id=str(user_id), email=str(session.get("email", "")))


def _mirror_to_session(user: Optional[SessionUser]) -> None:
    if user is None:
        session.clear()
        return
    session.clear()
    session.update(user.to_session())


def bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return ""
    return token.strip()


def bind_auth_context(app: Flask, resolve_token: Callable[[str], SessionUser]) -> None:
    """Attach a fresh AuthContext to flask.g before each request."""

    @app.before_request
    def load_auth_context():
        user = _user_from_session()
        if user is None:
            token = bearer_token()
            if token:
                try:
                    user = resolve_token(token)
                except AuthenticationError as e:
                    logger.debug("Ignoring bearer token: %s", e)

        ctx = AuthContext(user)
        ctx.subscribe(_mirror_to_session)
        g.auth = ctx


def current_auth() -> AuthContext:
    ctx = g.get("auth")
    if ctx is None:
        ctx = AuthContext()
        g.auth = ctx
    return ctx


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_auth().is_authenticated:
            return (
                jsonify(
                    {
                        "success": False,
                        "message": "Please sign in to continue",
                        "redirect": url_for("auth_page"),
                    }
                ),
                401,
            )
        return view(*args, **kwargs)

    return wrapper

"""Operator session: who is signed in to the admin shell.

Login accepts any non-empty email and password. It only gates which view
the shell shows and is not an authentication mechanism.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from cmsadmin.shared.observable import Observable

logger = logging.getLogger(__name__)


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    role: str


class SessionState(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: User | None = None
    is_authenticated: bool = False


class LoginResult(BaseModel):
    """Outcome of a login attempt; ``errors`` maps form field to message."""

    user: User | None = None
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.user is not None


class SessionStore(Observable[SessionState]):
    def __init__(self) -> None:
        super().__init__(SessionState())

    def login(self, email: str, password: str) -> LoginResult:
        errors: dict[str, str] = {}
        if not email:
            errors["email"] = "Email is required"
        if not password:
            errors["password"] = "Password is required"
        if errors:
            return LoginResult(errors=errors)

        user = User(id="1", name="Admin User", email=email, role="Administrator")
        self._publish(SessionState(user=user, is_authenticated=True))
        logger.info("Signed in as %s", user.email)
        return LoginResult(user=user)

    def logout(self) -> None:
        self._publish(SessionState())

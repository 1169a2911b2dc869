"""
Authentication provider protocol and an offline demo provider.
"""

import itertools
from typing import Any, Dict, Optional, Protocol

from loguru import logger

from .models import User
from ..navigation.routes import AUTHENTICATED_ROLES


class AuthError(Exception):
    """Login/logout failure reported by an auth provider."""


class AuthProvider(Protocol):
    """What the session coordinator needs from the auth backend."""

    async def login(self, credentials: Dict[str, Any]) -> User: ...

    async def logout(self) -> None: ...

    async def restore_session(self) -> Optional[User]: ...


class DemoAuthProvider:
    """
    Offline provider for running the client without a backend.

    Accepts any email with a non-empty password; the role comes from the
    credentials (the login form's role picker).
    """

    def __init__(self, persisted_user: Optional[User] = None):
        self._persisted_user = persisted_user
        self._ids = itertools.count(1)
        self.current_user: Optional[User] = None

    async def login(self, credentials: Dict[str, Any]) -> User:
        email = (credentials.get("email") or "").strip().lower()
        password = credentials.get("password") or ""
        role = credentials.get("role") or ""

        if not email or not password:
            raise AuthError("Please enter email and password")
        if role not in AUTHENTICATED_ROLES:
            raise AuthError(f"Unknown role: {role}")

        user = User(
            id=f"demo-{next(self._ids)}",
            name=email.split("@", 1)[0].replace(".", " ").title(),
            role=role,
            email=email,
        )
        self.current_user = user
        logger.debug(f"Demo login as {user.role} ({user.id})")
        return user

    async def logout(self) -> None:
        self.current_user = None
        self._persisted_user = None

    async def restore_session(self) -> Optional[User]:
        return self._persisted_user

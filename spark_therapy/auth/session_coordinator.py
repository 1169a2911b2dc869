"""
Session coordinator: the navigation consequence of authentication.

Login lands the user on their role's root, logout always returns to the auth
flow, and a persisted session restores straight into the role's app.
"""

from typing import Any, Dict, Optional

from loguru import logger

from .models import User
from .provider import AuthError, AuthProvider
from ..navigation.router import SessionRouter


class SessionCoordinator:
    """Wires an AuthProvider to a SessionRouter."""

    def __init__(self, provider: AuthProvider, router: SessionRouter):
        self.provider = provider
        self.router = router
        self.user: Optional[User] = None
        self.error: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    async def login(self, credentials: Dict[str, Any]) -> bool:
        """
        Log in and reset navigation to the user's role root.

        Returns:
            True on success. On failure ``error`` holds the message and
            navigation is left untouched.
        """
        self.error = None
        try:
            user = await self.provider.login(credentials)
        except AuthError as e:
            self.error = str(e) or "Login failed"
            logger.warning(f"Login failed: {self.error}")
            return False
        except Exception as e:
            self.error = "Login failed"
            logger.error(f"Auth provider error during login: {e}")
            return False

        self.user = user
        logger.info(f"Logged in user {user.id} with role '{user.role}'")
        self.router.reset_to_role_root(user.role)
        return True

    async def logout(self) -> None:
        """Log out and reset navigation to the auth flow, even if the backend call fails."""
        self.error = None
        try:
            await self.provider.logout()
        except Exception as e:
            logger.warning(f"Backend logout failed, clearing local session anyway: {e}")
        finally:
            self.user = None
            self.router.reset_to_unauthenticated()
        logger.info("Logged out")

    async def restore(self, user: Optional[User] = None) -> bool:
        """
        Restore a session on cold start. True if a user was restored.

        Args:
            user: Persisted user, if the caller already has one. Otherwise the
                provider is asked for its persisted session.
        """
        if user is None:
            try:
                user = await self.provider.restore_session()
            except AuthError as e:
                logger.warning(f"Could not restore session: {e}")
                return False
            except Exception as e:
                logger.error(f"Auth provider error during session restore: {e}")
                return False

        if user is None:
            logger.debug("No persisted session")
            return False

        self.user = user
        logger.info(f"Restored session for user {user.id} ({user.role})")
        self.router.reset_to_role_root(user.role)
        return True

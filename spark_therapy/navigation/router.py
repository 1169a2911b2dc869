"""
Session router.

A handle on the navigation tree that works outside the widget tree: auth
callbacks, API completions and other async code can navigate without a
screen reference. The router is built by the app's composition root and
handed to whoever needs it.

Commands issued before the tree is ready are dropped, not queued. No
operation raises.
"""

from typing import Any, Dict, Mapping, Optional, Protocol

from loguru import logger

from ..logging_config import mask_sensitive_params
from ..state.session_state import Session
from .routes import AUTH_ROUTE, DEFAULT_ROLE, ROLE_UNAUTHENTICATED, ROUTE_TABLE, resolve_role


class NavigationTree(Protocol):
    """What the router needs from the runtime's navigation tree."""

    def is_ready(self) -> bool: ...

    def navigate(self, route_name: str, params: Optional[Dict[str, Any]] = None) -> bool: ...

    def reset(self, routes) -> None: ...

    def go_back(self) -> bool: ...


class SessionRouter:
    """Imperative navigation commands plus the session they imply."""

    def __init__(self, tree: NavigationTree,
                 route_table: Mapping[str, str] = ROUTE_TABLE,
                 fallback_role: str = DEFAULT_ROLE):
        self.tree = tree
        self.route_table = route_table
        if fallback_role not in route_table:
            logger.warning(f"Fallback role '{fallback_role}' has no root route, using '{DEFAULT_ROLE}'")
            fallback_role = DEFAULT_ROLE
        self.fallback_role = fallback_role
        self._session = Session()

    @property
    def session(self) -> Session:
        """Session state, with ``is_ready`` refreshed from the tree."""
        self._session.is_ready = self.is_ready
        return self._session

    @property
    def is_ready(self) -> bool:
        try:
            return bool(self.tree.is_ready())
        except Exception as e:
            logger.error(f"Navigation tree readiness check failed: {e}")
            return False

    def _check_ready(self, command: str) -> bool:
        ready = self.is_ready
        self._session.is_ready = ready
        if not ready:
            logger.debug(f"Navigation tree not ready, dropping {command}")
        return ready

    def navigate_to(self, route_name: str, params: Optional[Dict[str, Any]] = None) -> bool:
        """
        Navigate to a route if the tree is ready.

        Args:
            route_name: Destination route name
            params: Optional route params

        Returns:
            True if the navigation was dispatched and handled
        """
        if not self._check_ready(f"navigate_to({route_name!r})"):
            return False

        try:
            handled = self.tree.navigate(route_name, params)
        except Exception as e:
            logger.error(f"Failed to navigate to {route_name}: {e}")
            return False

        if handled:
            logger.info(f"Navigated to {route_name} {mask_sensitive_params(params or {})}")
        return bool(handled)

    def reset_to_unauthenticated(self) -> bool:
        """Replace the whole stack with the auth flow. Used after logout."""
        if not self._check_ready("reset_to_unauthenticated()"):
            return False

        try:
            self.tree.reset([AUTH_ROUTE])
        except Exception as e:
            logger.error(f"Failed to reset to {AUTH_ROUTE}: {e}")
            return False

        self._session.reset()
        logger.info(f"Navigation reset to {AUTH_ROUTE}")
        return True

    def reset_to_role_root(self, role: Any) -> bool:
        """Replace the whole stack with the root route of ``role`` (unknown -> fallback role)."""
        if not self._check_ready(f"reset_to_role_root({role!r})"):
            return False

        resolved_role, root_route = resolve_role(role, self.route_table, self.fallback_role)
        try:
            self.tree.reset([root_route])
        except Exception as e:
            logger.error(f"Failed to reset to {root_route}: {e}")
            return False

        self._session.user_role = resolved_role
        logger.info(f"Navigation reset to {root_route} for role '{resolved_role}'")
        return True

    def go_back(self) -> bool:
        """Pop one level if possible."""
        if not self._check_ready("go_back()"):
            return False

        try:
            return bool(self.tree.go_back())
        except Exception as e:
            logger.error(f"Failed to go back: {e}")
            return False

    @property
    def is_authenticated(self) -> bool:
        return self._session.user_role != ROLE_UNAUTHENTICATED

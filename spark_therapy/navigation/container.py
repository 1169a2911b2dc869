"""
Navigation container: the navigation tree owned by the runtime.

The container holds the root stack. Each root entry ("Auth", "AdminApp", ...)
owns a RoleNavigator for its nested tab/stack state. The Textual app mounts
the container and marks it ready; until then it refuses commands.
"""

import itertools
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from loguru import logger

from .composer import RoleNavigator, RoleNavigatorComposer, RouteEntry
from .exceptions import NavigationError, UnknownRouteError

Listener = Callable[[Dict[str, Any]], None]
RouteSpec = Union[str, Tuple[str, Optional[Dict[str, Any]]]]


class NavigationContainer:
    """Root stack of role navigators plus readiness and change listeners."""

    def __init__(self, composer: RoleNavigatorComposer):
        self.composer = composer
        self._ready = False
        self._routes: List[RouteEntry] = []
        self._listeners: List[Listener] = []
        self._key_counter = itertools.count(1)

    # Readiness

    def is_ready(self) -> bool:
        return self._ready

    def mark_ready(self, initial_route: Optional[str] = None) -> None:
        """Signal that the tree is mounted, optionally seeding the root stack."""
        if initial_route and not self._routes:
            self._routes = [self._make_root_entry(initial_route, None)]
        self._ready = True
        logger.info(f"Navigation container ready (root: {self.route_names()})")
        self._notify()

    def mark_unmounted(self) -> None:
        self._ready = False
        logger.debug("Navigation container unmounted")

    # Listeners

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state)`` after every change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return _remove

    def _notify(self) -> None:
        state = self.get_state()
        for listener in list(self._listeners):
            listener(state)

    # Commands

    def navigate(self, route_name: str, params: Optional[Dict[str, Any]] = None) -> bool:
        """
        Navigate to a route anywhere in the focused subtree or the root stack.

        Returns:
            True if a navigator handled the action, False otherwise
        """
        self._require_ready()

        top = self.current_route()
        if top is not None and top.navigator is not None and top.navigator.navigate(route_name, params):
            self._notify()
            return True

        if self.composer.is_root_route(route_name):
            for i, entry in enumerate(self._routes):
                if entry.name == route_name:
                    del self._routes[i + 1:]
                    if params is not None:
                        entry.params = dict(params)
                    break
            else:
                self._routes.append(self._make_root_entry(route_name, params))
            self._notify()
            return True

        logger.error(f"The action NAVIGATE to '{route_name}' was not handled by any navigator")
        return False

    def reset(self, routes: Iterable[RouteSpec]) -> None:
        """Replace the whole root stack. Every route must be a root route."""
        self._require_ready()

        new_routes = []
        for item in routes:
            name, params = (item, None) if isinstance(item, str) else item
            new_routes.append(self._make_root_entry(name, params))
        if not new_routes:
            raise NavigationError("reset() needs at least one route")

        self._routes = new_routes
        self._notify()

    def go_back(self) -> bool:
        """Pop the focused navigator's stack, else the root stack. False if nothing to pop."""
        self._require_ready()

        top = self.current_route()
        if top is not None and top.navigator is not None and top.navigator.pop():
            self._notify()
            return True
        if len(self._routes) > 1:
            self._routes.pop()
            self._notify()
            return True
        return False

    # Introspection

    def current_route(self) -> Optional[RouteEntry]:
        return self._routes[-1] if self._routes else None

    def current_navigator(self) -> Optional[RoleNavigator]:
        top = self.current_route()
        return top.navigator if top is not None else None

    def focused_route_name(self) -> Optional[str]:
        navigator = self.current_navigator()
        if navigator is not None:
            return navigator.focused.name
        top = self.current_route()
        return top.name if top is not None else None

    def route_names(self) -> List[str]:
        return [entry.name for entry in self._routes]

    @property
    def depth(self) -> int:
        """Root entries below the top plus the focused navigator's depth."""
        if not self._routes:
            return 0
        navigator = self.current_navigator()
        return len(self._routes) - 1 + (navigator.depth if navigator is not None else 1)

    def get_state(self) -> Dict[str, Any]:
        return {
            "ready": self._ready,
            "index": len(self._routes) - 1,
            "routes": [entry.to_dict() for entry in self._routes],
        }

    # Internals

    def _require_ready(self) -> None:
        if not self._ready:
            raise NavigationError("Navigation container is not ready")

    def _make_key(self, name: str) -> str:
        return f"{name}-{next(self._key_counter)}"

    def _make_root_entry(self, name: str, params: Optional[Dict[str, Any]]) -> RouteEntry:
        if not self.composer.is_root_route(name):
            raise UnknownRouteError(name)
        return RouteEntry(
            name=name,
            key=self._make_key(name),
            params=dict(params or {}),
            navigator=self.composer.compose(name, self._make_key),
        )

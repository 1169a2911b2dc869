"""
Role navigator composer.

Builds the runtime state of a role's navigator (tab navigator wrapped by a
stack navigator) from its NavigatorSpec. The same builder serves every role.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from loguru import logger

from .exceptions import UnknownRouteError
from .registry import NavigatorRegistry, NavigatorSpec, ScreenSpec

KeyFactory = Callable[[str], str]


@dataclass
class RouteEntry:
    """One entry in a navigation stack."""
    name: str
    key: str
    params: Dict[str, Any] = field(default_factory=dict)
    navigator: Optional["RoleNavigator"] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name, "key": self.key, "params": dict(self.params)}
        if self.navigator is not None:
            data["state"] = self.navigator.get_state()
        return data


class RoleNavigator:
    """
    Tab navigator wrapped by a stack navigator.

    State is (active tab, secondary stack). Depth is 1 with no secondary
    screens pushed, plus one per pushed screen.
    """

    def __init__(self, spec: NavigatorSpec, make_key: KeyFactory):
        self.spec = spec
        self._make_key = make_key
        self.tabs: List[RouteEntry] = [RouteEntry(s.route_name, make_key(s.route_name)) for s in spec.tabs]
        self.index = 0
        self.stack: List[RouteEntry] = []

    @property
    def role(self) -> str:
        return self.spec.role

    @property
    def depth(self) -> int:
        return 1 + len(self.stack)

    @property
    def active_tab(self) -> RouteEntry:
        return self.tabs[self.index]

    @property
    def focused(self) -> RouteEntry:
        """The entry currently on screen."""
        return self.stack[-1] if self.stack else self.active_tab

    def focused_spec(self) -> ScreenSpec:
        return self.spec.find(self.focused.name)

    def handles(self, route_name: str) -> bool:
        return self.spec.find(route_name) is not None

    def navigate(self, route_name: str, params: Optional[Dict[str, Any]] = None) -> bool:
        """Select a tab or push a secondary screen. False if the route isn't ours."""
        if self.spec.is_tab(route_name):
            return self.select_tab(route_name, params)
        if self.spec.is_stack_screen(route_name):
            return self.push(route_name, params)
        return False

    def select_tab(self, route_name: str, params: Optional[Dict[str, Any]] = None) -> bool:
        for i, entry in enumerate(self.tabs):
            if entry.name == route_name:
                self.index = i
                self.stack.clear()
                if params:
                    entry.params = {**entry.params, **params}
                logger.debug(f"[{self.role}] tab -> {route_name}")
                return True
        return False

    def push(self, route_name: str, params: Optional[Dict[str, Any]] = None) -> bool:
        if not self.spec.is_stack_screen(route_name):
            return False

        # Already in the stack: go back to it instead of pushing a duplicate
        for i, entry in enumerate(self.stack):
            if entry.name == route_name:
                del self.stack[i + 1:]
                if params is not None:
                    entry.params = dict(params)
                logger.debug(f"[{self.role}] back to {route_name}, depth {self.depth}")
                return True

        self.stack.append(RouteEntry(route_name, self._make_key(route_name), dict(params or {})))
        logger.debug(f"[{self.role}] push {route_name}, depth {self.depth}")
        return True

    def pop(self) -> bool:
        """Pop one secondary screen. False at depth 1 (nothing of ours to pop)."""
        if not self.stack:
            return False
        entry = self.stack.pop()
        logger.debug(f"[{self.role}] pop {entry.name}, depth {self.depth}")
        return True

    def get_state(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "index": self.index,
            "tabs": [e.to_dict() for e in self.tabs],
            "stack": [e.to_dict() for e in self.stack],
            "depth": self.depth,
        }


class RoleNavigatorComposer:
    """Creates RoleNavigator instances for root routes from a registry."""

    def __init__(self, registry: NavigatorRegistry):
        self.registry = registry

    def is_root_route(self, name: str) -> bool:
        return self.registry.is_root_route(name)

    def root_routes(self) -> List[str]:
        return self.registry.root_routes()

    def compose(self, root_route: str, make_key: KeyFactory) -> RoleNavigator:
        spec = self.registry.for_root_route(root_route)
        if spec is None:
            raise UnknownRouteError(root_route)
        return RoleNavigator(spec, make_key)

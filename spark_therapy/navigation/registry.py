"""
Declarative registry of role navigators.

Each role is described by a NavigatorSpec: an ordered list of tab destinations
and an ordered list of secondary (stack) destinations. The composer builds
every role's navigator from these tables with the same code.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Tuple

from loguru import logger

from .exceptions import RegistryError

# Default component for destinations that don't register their own widget.
DESTINATION_PANE = "spark_therapy.UI.Panes.destination_pane.DestinationPane"


@dataclass(frozen=True)
class ScreenSpec:
    """One destination: route name, component reference, icon and label."""
    route_name: str
    component: str = DESTINATION_PANE
    icon: str = ""
    label: str = ""
    header_shown: bool = True

    @property
    def title(self) -> str:
        return self.label or self.route_name


@dataclass(frozen=True)
class NavigatorSpec:
    """Tab navigator wrapped by a stack navigator, for one role."""
    role: str
    root_route: str
    title: str
    accent_color: str
    tabs: Tuple[ScreenSpec, ...]
    stack_screens: Tuple[ScreenSpec, ...] = field(default_factory=tuple)
    show_tab_bar: bool = True
    header_shown: bool = True

    def route_names(self) -> List[str]:
        return [s.route_name for s in self.tabs] + [s.route_name for s in self.stack_screens]

    def find(self, route_name: str) -> Optional[ScreenSpec]:
        for screen in self.tabs + self.stack_screens:
            if screen.route_name == route_name:
                return screen
        return None

    def is_tab(self, route_name: str) -> bool:
        return any(s.route_name == route_name for s in self.tabs)

    def is_stack_screen(self, route_name: str) -> bool:
        return any(s.route_name == route_name for s in self.stack_screens)


def _validate(spec: NavigatorSpec) -> None:
    if not spec.tabs:
        raise RegistryError(f"Navigator for role '{spec.role}' has no tabs")
    names = spec.route_names()
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise RegistryError(f"Duplicate routes in '{spec.role}' navigator: {duplicates}")
    if spec.root_route in names:
        raise RegistryError(f"Root route '{spec.root_route}' reused as a destination")


class NavigatorRegistry:
    """Central registry of role navigators, keyed by role and by root route."""

    def __init__(self, specs: Iterable[NavigatorSpec] = ()):
        self._by_role: Dict[str, NavigatorSpec] = {}
        self._by_root: Dict[str, NavigatorSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: NavigatorSpec) -> None:
        """Register a navigator. Roles and root routes must be unique."""
        _validate(spec)
        if spec.role in self._by_role:
            raise RegistryError(f"Role already registered: {spec.role}")
        if spec.root_route in self._by_root:
            raise RegistryError(f"Root route already registered: {spec.root_route}")

        self._by_role[spec.role] = spec
        self._by_root[spec.root_route] = spec
        logger.debug(f"Registered navigator: {spec.role} -> {spec.root_route} "
                     f"({len(spec.tabs)} tabs, {len(spec.stack_screens)} stack screens)")

    def replace(self, spec: NavigatorSpec) -> None:
        """Swap the navigator registered for ``spec.role``."""
        _validate(spec)
        old = self.for_role(spec.role)
        if spec.root_route != old.root_route and spec.root_route in self._by_root:
            raise RegistryError(f"Root route already registered: {spec.root_route}")
        del self._by_root[old.root_route]
        self._by_role[spec.role] = spec
        self._by_root[spec.root_route] = spec

    def set_accent(self, role: str, color: str) -> None:
        """Override the header/tab accent color of a role."""
        self.replace(replace(self.for_role(role), accent_color=color))
        logger.debug(f"Accent for {role} set to {color}")

    def for_role(self, role: str) -> NavigatorSpec:
        try:
            return self._by_role[role]
        except KeyError:
            raise RegistryError(f"No navigator registered for role: {role}") from None

    def for_root_route(self, root_route: str) -> Optional[NavigatorSpec]:
        return self._by_root.get(root_route)

    def is_root_route(self, name: str) -> bool:
        return name in self._by_root

    def roles(self) -> List[str]:
        return list(self._by_role)

    def root_routes(self) -> List[str]:
        return list(self._by_root)

    def list_screens(self) -> Dict[str, List[str]]:
        """Route names per root route."""
        return {root: spec.route_names() for root, spec in self._by_root.items()}

"""
Exceptions raised by the navigation layer.
"""


class NavigationError(Exception):
    """Base class for navigation errors."""


class UnknownRouteError(NavigationError):
    """A route name that no navigator in the tree declares."""

    def __init__(self, route_name: str):
        super().__init__(f"Unknown route: {route_name}")
        self.route_name = route_name


class RegistryError(NavigationError):
    """Invalid navigator registration (duplicate or missing role/route)."""

"""
Navigation management module.
"""

from .composer import RoleNavigator, RoleNavigatorComposer, RouteEntry
from .container import NavigationContainer
from .exceptions import NavigationError, RegistryError, UnknownRouteError
from .registry import NavigatorRegistry, NavigatorSpec, ScreenSpec
from .role_tables import build_default_registry
from .router import NavigationTree, SessionRouter
from .routes import AUTH_ROUTE, ROUTE_TABLE, root_route_for

__all__ = [
    'AUTH_ROUTE',
    'ROUTE_TABLE',
    'NavigationContainer',
    'NavigationError',
    'NavigationTree',
    'NavigatorRegistry',
    'NavigatorSpec',
    'RegistryError',
    'RoleNavigator',
    'RoleNavigatorComposer',
    'RouteEntry',
    'ScreenSpec',
    'SessionRouter',
    'UnknownRouteError',
    'build_default_registry',
    'root_route_for',
]

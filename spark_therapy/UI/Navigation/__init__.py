"""Navigation components for the root screens."""

from .main_navigation import GoBack, LogoutRequested, NavigateTo, RoleTabBar
from .base_app_screen import BaseAppScreen

__all__ = [
    'BaseAppScreen',
    'GoBack',
    'LogoutRequested',
    'NavigateTo',
    'RoleTabBar',
]

"""Root screens, one per root route."""

from .auth_screen import AuthScreen
from .role_app_screen import RoleAppScreen

__all__ = [
    'AuthScreen',
    'RoleAppScreen',
]

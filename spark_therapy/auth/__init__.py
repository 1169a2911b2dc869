"""
Authentication collaborator seam: user model, provider protocol and the
coordinator that turns auth state changes into navigation resets.
"""

from .models import User
from .provider import AuthError, AuthProvider, DemoAuthProvider
from .session_coordinator import SessionCoordinator

__all__ = [
    'AuthError',
    'AuthProvider',
    'DemoAuthProvider',
    'SessionCoordinator',
    'User',
]

"""
Session state owned by the session router.
"""

from dataclasses import dataclass

ROLE_UNAUTHENTICATED = "unauthenticated"


@dataclass
class Session:
    """Which role's tree is mounted, and whether the tree accepts commands."""

    user_role: str = ROLE_UNAUTHENTICATED
    is_ready: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_role != ROLE_UNAUTHENTICATED

    def reset(self) -> None:
        """Back to the logged-out state (readiness is kept)."""
        self.user_role = ROLE_UNAUTHENTICATED

    def to_dict(self) -> dict:
        return {"user_role": self.user_role, "is_ready": self.is_ready}

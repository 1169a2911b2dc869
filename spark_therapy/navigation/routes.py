"""
Root route table: which top-level route represents each role's app.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from loguru import logger

from ..state.session_state import ROLE_UNAUTHENTICATED

ROLE_ADMIN = "admin"
ROLE_THERAPIST = "therapist"
ROLE_PARENT = "parent"

AUTHENTICATED_ROLES = (ROLE_ADMIN, ROLE_THERAPIST, ROLE_PARENT)

AUTH_ROUTE = "Auth"
ADMIN_ROUTE = "AdminApp"
THERAPIST_ROUTE = "TherapistApp"
PARENT_ROUTE = "ParentApp"

# Unrecognized roles land here
DEFAULT_ROLE = ROLE_PARENT

ROUTE_TABLE: Mapping[str, str] = MappingProxyType({
    ROLE_ADMIN: ADMIN_ROUTE,
    ROLE_THERAPIST: THERAPIST_ROUTE,
    ROLE_PARENT: PARENT_ROUTE,
    ROLE_UNAUTHENTICATED: AUTH_ROUTE,
})


def resolve_role(role, route_table: Mapping[str, str] = ROUTE_TABLE,
                 fallback_role: str = DEFAULT_ROLE) -> Tuple[str, str]:
    """
    Look up the root route for a role.

    Args:
        role: Role name as reported by the auth backend (any value)
        route_table: Role to root route mapping
        fallback_role: Role used when ``role`` is not in the table

    Returns:
        (resolved_role, root_route_name)
    """
    if isinstance(role, str) and role in route_table:
        return role, route_table[role]

    logger.warning(f"Unrecognized role {role!r}, falling back to '{fallback_role}'")
    return fallback_role, route_table[fallback_role]


def root_route_for(role) -> str:
    """Root route name for ``role`` using the default table."""
    return resolve_role(role)[1]

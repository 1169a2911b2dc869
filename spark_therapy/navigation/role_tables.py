"""
Navigator tables for each role of the clinic client.
"""

from typing import Mapping, Optional

from .registry import NavigatorRegistry, NavigatorSpec, ScreenSpec
from .routes import (
    ADMIN_ROUTE, AUTH_ROUTE, PARENT_ROUTE, THERAPIST_ROUTE,
    ROLE_ADMIN, ROLE_PARENT, ROLE_THERAPIST, ROLE_UNAUTHENTICATED,
)

ADMIN_ACCENT = "#FF9500"
THERAPIST_ACCENT = "#34C759"
PARENT_ACCENT = "#007AFF"
AUTH_ACCENT = "#007AFF"

LOGIN_PANE = "spark_therapy.UI.Panes.auth_panes.LoginPane"
REGISTER_PANE = "spark_therapy.UI.Panes.auth_panes.RegisterPane"


AUTH_NAVIGATOR = NavigatorSpec(
    role=ROLE_UNAUTHENTICATED,
    root_route=AUTH_ROUTE,
    title="Sign in",
    accent_color=AUTH_ACCENT,
    tabs=(
        ScreenSpec("Login", component=LOGIN_PANE, icon="🔐", label="Login", header_shown=False),
    ),
    stack_screens=(
        ScreenSpec("Register", component=REGISTER_PANE, icon="📝", label="Register", header_shown=False),
    ),
    show_tab_bar=False,
    header_shown=False,
)

ADMIN_NAVIGATOR = NavigatorSpec(
    role=ROLE_ADMIN,
    root_route=ADMIN_ROUTE,
    title="Admin",
    accent_color=ADMIN_ACCENT,
    tabs=(
        ScreenSpec("Dashboard", icon="▦", label="Dashboard"),
        ScreenSpec("Therapists", icon="👥", label="Therapists"),
        ScreenSpec("Children", icon="🧒", label="Children"),
        ScreenSpec("Notifications", icon="🔔", label="Notifications"),
    ),
    stack_screens=(
        ScreenSpec("Scheduling", icon="📅", label="Scheduling"),
        ScreenSpec("Complaints", icon="⚠", label="Complaints"),
        ScreenSpec("FeeManagement", icon="💵", label="Fee Management"),
        ScreenSpec("Deactivation", icon="🚫", label="Deactivation"),
        ScreenSpec("LeaveRequests", icon="📆", label="Leave Requests"),
        ScreenSpec("Broadcast", icon="📣", label="Broadcast Notifications"),
        ScreenSpec("Invoices", icon="🧾", label="Invoices"),
        ScreenSpec("FeedbackSection", icon="💬", label="Feedback Management"),
        ScreenSpec("ChildrenSection", icon="🧑‍🤝‍🧑", label="Children Mgmt"),
    ),
)

THERAPIST_NAVIGATOR = NavigatorSpec(
    role=ROLE_THERAPIST,
    root_route=THERAPIST_ROUTE,
    title="Therapist",
    accent_color=THERAPIST_ACCENT,
    tabs=(
        ScreenSpec("Dashboard", icon="🏠", label="Home"),
        ScreenSpec("Children", icon="👤", label="Children"),
        ScreenSpec("Feedback", icon="💬", label="Feedback"),
        ScreenSpec("Schedule", icon="📅", label="Schedule"),
        ScreenSpec("Notifications", icon="🔔", label="Alerts"),
    ),
    stack_screens=(
        ScreenSpec("Video", icon="▶", label="Weekly Video"),
        ScreenSpec("Reports", icon="📄", label="Quarterly Reports"),
        ScreenSpec("Leave", icon="📆", label="Leave Requests"),
        ScreenSpec("Programs", icon="📚", label="Program Builder"),
    ),
)

PARENT_NAVIGATOR = NavigatorSpec(
    role=ROLE_PARENT,
    root_route=PARENT_ROUTE,
    title="Parent",
    accent_color=PARENT_ACCENT,
    tabs=(
        ScreenSpec("Dashboard", icon="🏠", label="Home"),
        ScreenSpec("Feedback", icon="💬", label="Feedback"),
        ScreenSpec("Videos", icon="▶", label="Videos"),
        ScreenSpec("Schedule", icon="📅", label="Schedule"),
    ),
    stack_screens=(
        ScreenSpec("Reports", icon="📄", label="Quarterly Reports"),
        ScreenSpec("IEPGoals", icon="🎯", label="IEP Goals"),
        ScreenSpec("Attendance", icon="✅", label="Attendance"),
        ScreenSpec("Complaints", icon="⚠", label="Complaints"),
        ScreenSpec("Fees", icon="💵", label="Fees"),
        ScreenSpec("VideoUpload", icon="⬆", label="Upload Video"),
        ScreenSpec("Notifications", icon="🔔", label="Notifications"),
        ScreenSpec("Invoices", icon="🧾", label="Invoices"),
    ),
)

DEFAULT_NAVIGATORS = (AUTH_NAVIGATOR, ADMIN_NAVIGATOR, THERAPIST_NAVIGATOR, PARENT_NAVIGATOR)


def build_default_registry(accent_overrides: Optional[Mapping[str, str]] = None) -> NavigatorRegistry:
    """
    Registry with the auth flow and the three role navigators.

    Args:
        accent_overrides: Optional role -> color mapping (from the [theme] config section)
    """
    registry = NavigatorRegistry(DEFAULT_NAVIGATORS)
    for role, color in (accent_overrides or {}).items():
        if role in registry.roles() and color:
            registry.set_accent(role, str(color))
    return registry

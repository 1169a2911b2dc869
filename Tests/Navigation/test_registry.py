"""
Tests for the navigator registry and the route table.
"""

import pytest

from spark_therapy.navigation import (
    NavigatorRegistry, NavigatorSpec, RegistryError, ScreenSpec, build_default_registry,
)
from spark_therapy.navigation.registry import DESTINATION_PANE
from spark_therapy.navigation.routes import (
    AUTHENTICATED_ROLES, ROUTE_TABLE, resolve_role, root_route_for,
)


def _spec(role="guest", root="GuestApp", tabs=("Home",), stack=()):
    return NavigatorSpec(
        role=role,
        root_route=root,
        title=role.title(),
        accent_color="#123456",
        tabs=tuple(ScreenSpec(name) for name in tabs),
        stack_screens=tuple(ScreenSpec(name) for name in stack),
    )


class TestNavigatorRegistry:

    def test_default_registry(self, registry):
        assert registry.roles() == ["unauthenticated", "admin", "therapist", "parent"]
        assert registry.root_routes() == ["Auth", "AdminApp", "TherapistApp", "ParentApp"]
        assert registry.is_root_route("TherapistApp")
        assert not registry.is_root_route("Dashboard")

    def test_list_screens(self, registry):
        screens = registry.list_screens()

        assert screens["Auth"] == ["Login", "Register"]
        assert screens["TherapistApp"][:5] == ["Dashboard", "Children", "Feedback", "Schedule", "Notifications"]

    def test_register_and_lookup(self):
        registry = NavigatorRegistry()
        spec = _spec()

        registry.register(spec)

        assert registry.for_role("guest") is spec
        assert registry.for_root_route("GuestApp") is spec
        assert registry.for_root_route("Nope") is None

    def test_unknown_role_lookup(self, registry):
        with pytest.raises(RegistryError):
            registry.for_role("superuser")

    def test_duplicate_role(self):
        registry = NavigatorRegistry([_spec()])

        with pytest.raises(RegistryError):
            registry.register(_spec(root="OtherApp"))

    def test_duplicate_root_route(self):
        registry = NavigatorRegistry([_spec()])

        with pytest.raises(RegistryError):
            registry.register(_spec(role="visitor"))

    def test_navigator_without_tabs(self):
        with pytest.raises(RegistryError):
            NavigatorRegistry([_spec(tabs=())])

    def test_duplicate_destination(self):
        with pytest.raises(RegistryError):
            NavigatorRegistry([_spec(tabs=("Home",), stack=("Home",))])

    def test_root_route_as_destination(self):
        with pytest.raises(RegistryError):
            NavigatorRegistry([_spec(tabs=("GuestApp",))])

    def test_replace(self):
        registry = NavigatorRegistry([_spec()])

        registry.replace(_spec(root="GuestApp2", tabs=("Start",)))

        assert registry.for_role("guest").root_route == "GuestApp2"
        assert not registry.is_root_route("GuestApp")

    def test_set_accent(self, registry):
        registry.set_accent("parent", "#000000")

        assert registry.for_role("parent").accent_color == "#000000"
        assert registry.for_root_route("ParentApp").accent_color == "#000000"

    def test_accent_overrides(self):
        registry = build_default_registry({"admin": "#111111", "nobody": "#222222", "parent": ""})

        assert registry.for_role("admin").accent_color == "#111111"
        assert registry.for_role("parent").accent_color == "#007AFF"

    def test_screen_spec_defaults(self):
        screen = ScreenSpec("Dashboard")

        assert screen.component == DESTINATION_PANE
        assert screen.title == "Dashboard"
        assert ScreenSpec("IEPGoals", label="IEP Goals").title == "IEP Goals"


class TestRouteTable:

    def test_every_authenticated_role_has_a_root(self):
        assert {role: ROUTE_TABLE[role] for role in AUTHENTICATED_ROLES} == {
            "admin": "AdminApp",
            "therapist": "TherapistApp",
            "parent": "ParentApp",
        }

    def test_route_table_is_read_only(self):
        with pytest.raises(TypeError):
            ROUTE_TABLE["admin"] = "ParentApp"

    def test_root_routes_are_registered(self):
        registry = build_default_registry()

        assert all(registry.is_root_route(route) for route in ROUTE_TABLE.values())

    def test_resolve_role(self):
        assert resolve_role("admin") == ("admin", "AdminApp")
        assert resolve_role("janitor") == ("parent", "ParentApp")
        assert resolve_role(None, fallback_role="therapist") == ("therapist", "TherapistApp")

    def test_root_route_for(self):
        assert root_route_for("therapist") == "TherapistApp"
        assert root_route_for("") == "ParentApp"

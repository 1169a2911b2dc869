"""
Tests for the navigation container (root stack, readiness, listeners).
"""

import pytest

from spark_therapy.navigation import NavigationError, UnknownRouteError


class TestReadiness:

    def test_starts_not_ready_and_empty(self, container):
        assert container.is_ready() is False
        assert container.current_route() is None
        assert container.depth == 0
        assert container.focused_route_name() is None

    def test_commands_before_ready_raise(self, container):
        with pytest.raises(NavigationError):
            container.navigate("Dashboard")
        with pytest.raises(NavigationError):
            container.reset(["Auth"])
        with pytest.raises(NavigationError):
            container.go_back()

    def test_mark_ready_seeds_initial_route(self, container):
        container.mark_ready("Auth")

        assert container.is_ready() is True
        assert container.route_names() == ["Auth"]
        assert container.focused_route_name() == "Login"
        assert container.depth == 1

    def test_mark_ready_keeps_existing_stack(self, ready_container):
        ready_container.reset(["ParentApp"])
        ready_container.mark_unmounted()

        ready_container.mark_ready("Auth")

        assert ready_container.route_names() == ["ParentApp"]

    def test_mark_ready_rejects_non_root_initial_route(self, container):
        with pytest.raises(UnknownRouteError):
            container.mark_ready("Dashboard")


class TestRootStack:

    def test_reset_replaces_everything(self, ready_container):
        ready_container.reset(["AdminApp"])
        ready_container.navigate("Broadcast")

        ready_container.reset(["TherapistApp"])

        assert ready_container.route_names() == ["TherapistApp"]
        assert ready_container.depth == 1

    def test_reset_accepts_params(self, ready_container):
        ready_container.reset([("ParentApp", {"childId": "c7"})])

        assert ready_container.current_route().params == {"childId": "c7"}

    def test_reset_with_nothing_raises(self, ready_container):
        with pytest.raises(NavigationError):
            ready_container.reset([])
        assert ready_container.route_names() == ["Auth"]

    def test_reset_to_unknown_route_raises(self, ready_container):
        with pytest.raises(UnknownRouteError) as exc_info:
            ready_container.reset(["NowhereApp"])

        assert exc_info.value.route_name == "NowhereApp"
        assert ready_container.route_names() == ["Auth"]

    def test_navigate_to_existing_root_truncates(self, ready_container):
        ready_container.navigate("ParentApp")
        ready_container.navigate("AdminApp")
        assert ready_container.route_names() == ["Auth", "ParentApp", "AdminApp"]

        assert ready_container.navigate("Auth") is True

        assert ready_container.route_names() == ["Auth"]

    def test_focused_navigator_handles_first(self, ready_container):
        # "Register" belongs to the auth flow, so it is pushed there
        assert ready_container.navigate("Register") is True

        assert ready_container.route_names() == ["Auth"]
        assert ready_container.focused_route_name() == "Register"
        assert ready_container.depth == 2

    def test_unhandled_navigate(self, ready_container):
        assert ready_container.navigate("Programs") is False

    def test_go_back_pops_nested_then_root(self, ready_container):
        ready_container.navigate("ParentApp")
        ready_container.navigate("Attendance")
        assert ready_container.depth == 3

        assert ready_container.go_back() is True
        assert ready_container.route_names() == ["Auth", "ParentApp"]
        assert ready_container.focused_route_name() == "Dashboard"

        assert ready_container.go_back() is True
        assert ready_container.route_names() == ["Auth"]

        assert ready_container.go_back() is False

    def test_route_keys_are_unique(self, ready_container):
        ready_container.reset(["AdminApp"])
        first = ready_container.current_route().key
        ready_container.reset(["AdminApp"])

        assert ready_container.current_route().key != first
        assert ready_container.current_route().key.startswith("AdminApp-")


class TestListeners:

    def test_listener_called_with_state(self, container):
        states = []
        container.add_listener(states.append)

        container.mark_ready("Auth")
        container.reset(["TherapistApp"])

        assert len(states) == 2
        assert states[-1]["ready"] is True
        assert states[-1]["routes"][0]["name"] == "TherapistApp"
        assert states[-1]["routes"][0]["state"]["role"] == "therapist"

    def test_unsubscribe(self, ready_container):
        states = []
        unsubscribe = ready_container.add_listener(states.append)
        unsubscribe()
        unsubscribe()

        ready_container.reset(["AdminApp"])

        assert states == []

    def test_no_notification_for_unhandled_navigate(self, ready_container):
        states = []
        ready_container.add_listener(states.append)

        ready_container.navigate("NotARoute")
        ready_container.go_back()

        assert states == []

"""
Tests for the role navigator composer and the per-role navigator state machine.
"""

import itertools

import pytest

from spark_therapy.navigation import RoleNavigatorComposer, UnknownRouteError


@pytest.fixture
def composer(registry):
    return RoleNavigatorComposer(registry)


@pytest.fixture
def make_key():
    counter = itertools.count(1)
    return lambda name: f"{name}-{next(counter)}"


def _tab_names(navigator):
    return [entry.name for entry in navigator.tabs]


class TestRoleTables:

    def test_therapist_has_five_tabs(self, composer, make_key):
        navigator = composer.compose("TherapistApp", make_key)

        assert _tab_names(navigator) == ["Dashboard", "Children", "Feedback", "Schedule", "Notifications"]

    @pytest.mark.parametrize("root_route", ["AdminApp", "ParentApp"])
    def test_other_roles_have_fewer_tabs(self, composer, make_key, root_route):
        navigator = composer.compose(root_route, make_key)

        assert len(navigator.tabs) == 4

    def test_stack_screens(self, registry):
        assert [s.route_name for s in registry.for_role("therapist").stack_screens] == [
            "Video", "Reports", "Leave", "Programs",
        ]
        assert [s.route_name for s in registry.for_role("parent").stack_screens] == [
            "Reports", "IEPGoals", "Attendance", "Complaints", "Fees",
            "VideoUpload", "Notifications", "Invoices",
        ]
        assert len(registry.for_role("admin").stack_screens) == 9

    def test_auth_flow_is_headerless(self, registry):
        spec = registry.for_role("unauthenticated")

        assert spec.root_route == "Auth"
        assert spec.header_shown is False
        assert spec.show_tab_bar is False
        assert spec.route_names() == ["Login", "Register"]

    def test_accent_colors(self, registry):
        assert registry.for_role("admin").accent_color == "#FF9500"
        assert registry.for_role("therapist").accent_color == "#34C759"
        assert registry.for_role("parent").accent_color == "#007AFF"

    def test_compose_unknown_root(self, composer, make_key):
        with pytest.raises(UnknownRouteError):
            composer.compose("Dashboard", make_key)


class TestRoleNavigator:

    @pytest.fixture
    def navigator(self, composer, make_key):
        return composer.compose("TherapistApp", make_key)

    def test_initial_state(self, navigator):
        assert navigator.role == "therapist"
        assert navigator.depth == 1
        assert navigator.active_tab.name == "Dashboard"
        assert navigator.focused.name == "Dashboard"

    def test_push_secondary(self, navigator):
        assert navigator.navigate("Video", {"childId": "c1"}) is True
        assert navigator.navigate("Reports") is True

        assert navigator.depth == 3
        assert navigator.focused.name == "Reports"
        assert navigator.focused_spec().label == "Quarterly Reports"

    def test_select_tab_clears_secondary_stack(self, navigator):
        navigator.navigate("Video")
        navigator.navigate("Leave")

        assert navigator.navigate("Feedback") is True

        assert navigator.depth == 1
        assert navigator.active_tab.name == "Feedback"
        assert navigator.focused.name == "Feedback"

    def test_select_tab_merges_params(self, navigator):
        navigator.navigate("Children", {"filter": "active"})
        navigator.navigate("Children", {"page": 2})

        assert navigator.active_tab.params == {"filter": "active", "page": 2}

    def test_push_existing_pops_back_to_it(self, navigator):
        navigator.navigate("Video", {"childId": "c1"})
        navigator.navigate("Reports")
        navigator.navigate("Leave")

        assert navigator.navigate("Video", {"childId": "c2"}) is True

        assert navigator.depth == 2
        assert navigator.focused.params == {"childId": "c2"}

    def test_pop(self, navigator):
        navigator.navigate("Programs")

        assert navigator.pop() is True
        assert navigator.depth == 1

    def test_pop_at_depth_one_is_unhandled(self, navigator):
        assert navigator.pop() is False
        assert navigator.depth == 1

    def test_foreign_route_is_not_handled(self, navigator):
        assert navigator.handles("Fees") is False
        assert navigator.navigate("Fees") is False
        assert navigator.push("Dashboard") is False
        assert navigator.depth == 1

    def test_get_state(self, navigator):
        navigator.navigate("Schedule")
        navigator.navigate("Leave", {"from": "2024-01-02"})

        state = navigator.get_state()

        assert state["role"] == "therapist"
        assert state["index"] == 3
        assert state["depth"] == 2
        assert state["stack"][0]["name"] == "Leave"
        assert state["stack"][0]["params"] == {"from": "2024-01-02"}

    def test_each_compose_is_independent(self, composer, make_key):
        first = composer.compose("ParentApp", make_key)
        second = composer.compose("ParentApp", make_key)
        first.navigate("Fees")

        assert second.depth == 1
        assert first.active_tab.key != second.active_tab.key

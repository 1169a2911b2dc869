"""
Tests for destination component lookup.
"""

from spark_therapy.UI.Panes import DestinationPane, resolve_component
from spark_therapy.UI.Panes.auth_panes import LoginPane
from spark_therapy.navigation.role_tables import LOGIN_PANE


def test_resolves_dotted_path():
    assert resolve_component(LOGIN_PANE) is LoginPane


def test_missing_module_falls_back_to_destination_pane():
    assert resolve_component("spark_therapy.UI.Panes.no_such_module.Widget") is DestinationPane


def test_missing_class_falls_back_to_destination_pane():
    assert resolve_component("spark_therapy.UI.Panes.auth_panes.NoSuchPane") is DestinationPane


def test_bare_name_falls_back_to_destination_pane():
    assert resolve_component("JustAName") is DestinationPane

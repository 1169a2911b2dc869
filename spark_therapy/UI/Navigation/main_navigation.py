"""Tab bar and navigation messages for the role app screens."""

from typing import Any, Dict, Optional, Sequence
from loguru import logger

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Static
from textual.message import Message
from textual import on

from ...navigation.registry import ScreenSpec


class NavigateTo(Message):
    """Message to request navigation to a route by name."""

    def __init__(self, route_name: str, params: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.route_name = route_name
        self.params = params


class GoBack(Message):
    """Message to request popping one navigation level."""


class LogoutRequested(Message):
    """Message to request logout."""


class RoleTabBar(Container):
    """
    Bottom tab bar for a role navigator.
    One button per tab destination; the active tab is highlighted.
    """

    DEFAULT_CSS = """
    RoleTabBar {
        height: 3;
        width: 100%;
        dock: bottom;
        background: $panel;
        border-top: solid $primary;
    }

    .tab-bar {
        height: 100%;
        width: 100%;
        layout: horizontal;
        align: center middle;
    }

    .tab-button {
        margin: 0;
        padding: 0 1;
        min-width: 8;
        background: transparent;
        border: none;
        height: 3;
    }

    .tab-button.active {
        text-style: bold;
    }

    .tab-separator {
        width: 1;
        color: $text-muted;
    }
    """

    def __init__(self, tabs: Sequence[ScreenSpec], active: str, accent_color: str, **kwargs):
        super().__init__(**kwargs)
        self.tabs = list(tabs)
        self.active_route = active
        self.accent_color = accent_color

    def compose(self) -> ComposeResult:
        with Horizontal(classes="tab-bar"):
            for i, tab in enumerate(self.tabs):
                if i > 0:
                    yield Static("|", classes="tab-separator")
                label = f"{tab.icon} {tab.title}" if tab.icon else tab.title
                button = Button(label, id=f"tab-{tab.route_name}", classes="tab-button")
                if tab.route_name == self.active_route:
                    button.add_class("active")
                yield button

    def on_mount(self) -> None:
        self._paint_active()

    def set_active(self, route_name: str) -> None:
        """Highlight ``route_name`` without posting a message."""
        if route_name == self.active_route:
            return
        self.active_route = route_name
        for button in self.query(".tab-button"):
            button.set_class(button.id == f"tab-{route_name}", "active")
        self._paint_active()

    def _paint_active(self) -> None:
        for button in self.query(".tab-button"):
            button.styles.color = self.accent_color if button.has_class("active") else None

    @on(Button.Pressed, ".tab-button")
    def handle_tab_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if not button_id:
            return
        event.stop()

        route_name = button_id[len("tab-"):]
        self.post_message(NavigateTo(route_name))
        logger.debug(f"Tab pressed: {route_name}")

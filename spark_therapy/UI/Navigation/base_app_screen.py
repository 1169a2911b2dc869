"""Base screen class for root navigation screens."""

from typing import TYPE_CHECKING, Optional, Tuple
from loguru import logger

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen

from ...navigation.composer import RoleNavigator, RouteEntry
from ..Panes.component_loader import resolve_component
from .main_navigation import RoleTabBar

if TYPE_CHECKING:
    from spark_therapy.app import SparkTherapyApp


class BaseAppScreen(Screen):
    """
    A Textual screen bound to one root route entry ("Auth", "AdminApp", ...).

    Renders the focused destination of the entry's navigator and, when the
    navigator shows one, its tab bar. The app calls ``sync_from`` whenever
    the navigator changes.
    """

    DEFAULT_CSS = """
    BaseAppScreen {
        background: $background;
    }

    #screen-content {
        width: 100%;
        height: 1fr;
    }
    """

    def __init__(self, app_instance: 'SparkTherapyApp', entry: RouteEntry, **kwargs):
        super().__init__(**kwargs)
        self.app_instance = app_instance
        self.entry = entry
        self.root_route = entry.name
        self._content_key: Optional[Tuple[str, str]] = None

        logger.debug(f"Initializing {self.__class__.__name__} for {self.root_route} ({entry.key})")

    @property
    def navigator(self) -> RoleNavigator:
        return self.entry.navigator

    def compose(self) -> ComposeResult:
        yield from self.compose_header()
        yield Container(id="screen-content")
        spec = self.navigator.spec
        if spec.show_tab_bar:
            yield RoleTabBar(
                spec.tabs,
                active=self.navigator.active_tab.name,
                accent_color=spec.accent_color,
                id="role-tab-bar",
            )

    def compose_header(self) -> ComposeResult:
        """Override in subclasses to add a header above the content."""
        yield from ()

    def update_header(self, navigator: RoleNavigator) -> None:
        """Override in subclasses to refresh the header."""

    def on_mount(self) -> None:
        logger.info(f"Screen {self.root_route} mounted")
        self.sync_from(self.navigator)

    def on_unmount(self) -> None:
        logger.info(f"Screen {self.root_route} unmounted")

    def sync_from(self, navigator: RoleNavigator) -> None:
        """Bring the widgets in line with the navigator's state."""
        self.update_header(navigator)

        if navigator.spec.show_tab_bar:
            self.query_one("#role-tab-bar", RoleTabBar).set_active(navigator.active_tab.name)

        focused = navigator.focused
        content_key = (focused.key, repr(sorted(focused.params.items())))
        if content_key == self._content_key:
            return

        screen_spec = navigator.focused_spec()
        component = resolve_component(screen_spec.component)
        is_secondary = bool(navigator.stack)
        pane = component(
            spec=screen_spec,
            params=focused.params,
            links=() if is_secondary else navigator.spec.stack_screens,
            is_secondary=is_secondary,
        )

        content = self.query_one("#screen-content", Container)
        content.remove_children()
        content.mount(pane)
        self._content_key = content_key
        logger.debug(f"{self.root_route} showing {focused.name} (depth {navigator.depth})")

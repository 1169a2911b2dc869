# role_app_screen.py
#
# Description: Root screen of an authenticated role (AdminApp, TherapistApp, ParentApp)
#
# Imports
from loguru import logger
from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

# Local imports
from ..Navigation.base_app_screen import BaseAppScreen
from ..Navigation.main_navigation import LogoutRequested
from ...navigation.composer import RoleNavigator

########################################################################################################################


class RoleAppScreen(BaseAppScreen):
    """Header in the role's accent color, focused destination, tab bar."""

    DEFAULT_CSS = """
    RoleAppScreen #role-header {
        height: 3;
        width: 100%;
        dock: top;
        padding: 0 1;
        align: left middle;
    }

    RoleAppScreen #role-header-title {
        width: 1fr;
        text-style: bold;
        color: white;
        content-align: left middle;
        height: 3;
    }

    RoleAppScreen #role-logout {
        min-width: 10;
    }
    """

    def compose_header(self) -> ComposeResult:
        with Horizontal(id="role-header"):
            yield Static("", id="role-header-title")
            yield Button("Logout", id="role-logout")

    def on_mount(self) -> None:
        self.query_one("#role-header").styles.background = self.navigator.spec.accent_color

    def update_header(self, navigator: RoleNavigator) -> None:
        header = self.query_one("#role-header")
        screen_spec = navigator.focused_spec()
        header.display = navigator.spec.header_shown and screen_spec.header_shown

        title = Text.assemble((navigator.spec.title, "bold"), " · ", screen_spec.title)
        user = self.app_instance.session.user
        if user is not None and user.name:
            title.append(f"  ·  {user.name}", style="italic")
        self.query_one("#role-header-title", Static).update(title)

    @on(Button.Pressed, "#role-logout")
    def handle_logout(self, event: Button.Pressed) -> None:
        event.stop()
        logger.debug(f"Logout pressed on {self.root_route}")
        self.post_message(LogoutRequested())

#
# End of role_app_screen.py
########################################################################################################################

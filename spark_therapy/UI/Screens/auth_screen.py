# auth_screen.py
#
# Description: Root screen of the unauthenticated flow (Login / Register)
#
# Imports
from textual.app import ComposeResult
from textual.widgets import Static

# Local imports
from ..Navigation.base_app_screen import BaseAppScreen
from ..Panes.auth_panes import LoginPane
from ...config import get_cli_setting

########################################################################################################################


class AuthScreen(BaseAppScreen):
    """Header-less stack with the login form and the register pane."""

    DEFAULT_CSS = """
    AuthScreen #auth-banner {
        height: 1;
        width: 100%;
        dock: top;
        content-align: center middle;
        color: $text-muted;
    }
    """

    def compose_header(self) -> ComposeResult:
        yield Static(get_cli_setting("general", "app_title", "SPARK Therapy"), id="auth-banner")

    def show_login_error(self, message: str) -> None:
        for pane in self.query(LoginPane):
            pane.show_error(message)

#
# End of auth_screen.py
########################################################################################################################

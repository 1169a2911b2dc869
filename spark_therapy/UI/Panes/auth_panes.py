# auth_panes.py
# Description: Login and Register panes of the auth flow
#
# Imports
from typing import Any, Dict, Optional, Sequence
#
# Third-Party Imports
from loguru import logger
from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.message import Message
from textual.widgets import Button, Input, Label, Select, Static
#
# Local Imports
from ...config import get_cli_setting
from ...navigation.registry import ScreenSpec
from ...navigation.routes import AUTHENTICATED_ROLES, ROLE_PARENT
from ..Navigation.main_navigation import GoBack, NavigateTo
#
#######################################################################################################################
#
# Classes:

class LoginRequested(Message):
    """Posted by the login form with the entered credentials."""

    def __init__(self, credentials: Dict[str, Any]):
        super().__init__()
        self.credentials = credentials


class LoginPane(Container):
    """Email/password form with a role picker (the demo backend trusts the picked role)."""

    DEFAULT_CSS = """
    LoginPane {
        align: center middle;
        height: 1fr;
    }

    #login-form {
        width: 60;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    #login-error {
        color: $error;
        height: auto;
    }

    #login-form Button {
        width: 100%;
        margin-top: 1;
    }
    """

    def __init__(self, spec: ScreenSpec, params: Optional[Dict[str, Any]] = None,
                 links: Sequence[ScreenSpec] = (), is_secondary: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.spec = spec
        self.params = dict(params or {})

    def compose(self) -> ComposeResult:
        default_role = get_cli_setting("general", "default_login_role", ROLE_PARENT)
        if default_role not in AUTHENTICATED_ROLES:
            default_role = ROLE_PARENT

        with Vertical(id="login-form"):
            yield Label(get_cli_setting("general", "app_title", "SPARK Therapy"), id="login-title")
            yield Input(placeholder="Email", id="login-email")
            yield Input(placeholder="Password", password=True, id="login-password")
            yield Select(
                [(role.title(), role) for role in AUTHENTICATED_ROLES],
                value=default_role,
                allow_blank=False,
                id="login-role",
            )
            yield Static(self.params.get("error", ""), id="login-error")
            yield Button("Login", id="login-submit", variant="primary")
            yield Button("Create an account", id="login-register")

    def show_error(self, message: str) -> None:
        self.query_one("#login-error", Static).update(message)

    def credentials(self) -> Dict[str, Any]:
        return {
            "email": self.query_one("#login-email", Input).value,
            "password": self.query_one("#login-password", Input).value,
            "role": self.query_one("#login-role", Select).value,
        }

    @on(Button.Pressed, "#login-submit")
    def handle_submit(self, event: Button.Pressed) -> None:
        event.stop()
        self.show_error("")
        self.post_message(LoginRequested(self.credentials()))

    @on(Input.Submitted)
    def handle_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(LoginRequested(self.credentials()))

    @on(Button.Pressed, "#login-register")
    def handle_register(self, event: Button.Pressed) -> None:
        event.stop()
        logger.debug("Register requested from login form")
        self.post_message(NavigateTo("Register"))


class RegisterPane(Container):
    """Accounts are created by the clinic; this pane tells parents how to get one."""

    DEFAULT_CSS = """
    RegisterPane {
        align: center middle;
        height: 1fr;
    }

    #register-box {
        width: 60;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }
    """

    def __init__(self, spec: ScreenSpec, params: Optional[Dict[str, Any]] = None,
                 links: Sequence[ScreenSpec] = (), is_secondary: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.spec = spec

    def compose(self) -> ComposeResult:
        with Vertical(id="register-box"):
            yield Label(self.spec.title)
            yield Static("Ask the clinic administrator to create your account, "
                         "then sign in with the credentials you receive.")
            yield Button("← Back to login", id="register-back")

    @on(Button.Pressed, "#register-back")
    def handle_back(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(GoBack())

#
# End of auth_panes.py
#######################################################################################################################

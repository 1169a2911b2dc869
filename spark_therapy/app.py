"""
Main application: composition root of the spark_therapy client.

Builds the navigator registry, the navigation container, the session router
and the session coordinator, then renders whichever root route is on top of
the container's stack as a Textual screen.
"""

from typing import Any, Dict, Optional

from loguru import logger
from textual import on
from textual.app import App
from textual.reactive import reactive

from .auth import AuthProvider, DemoAuthProvider, SessionCoordinator
from .config import get_cli_section, get_cli_setting, load_cli_config_and_ensure_existence
from .logging_config import configure_logging
from .navigation import (
    AUTH_ROUTE, NavigationContainer, NavigatorRegistry, RoleNavigatorComposer,
    RouteEntry, SessionRouter, build_default_registry,
)
from .navigation.routes import DEFAULT_ROLE
from .UI.Navigation import BaseAppScreen, GoBack, LogoutRequested, NavigateTo
from .UI.Panes.auth_panes import LoginRequested
from .UI.Screens import AuthScreen, RoleAppScreen


class SparkTherapyApp(App):
    """Textual client: one root screen per root route, driven by the session router."""

    TITLE = "SPARK Therapy"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("escape", "back", "Back"),
        ("ctrl+l", "logout", "Logout"),
    ]

    current_route: reactive[str] = reactive("")

    def __init__(self, registry: Optional[NavigatorRegistry] = None,
                 auth_provider: Optional[AuthProvider] = None):
        super().__init__()

        # Load configuration safely
        self._load_configuration()

        self.title = get_cli_setting("general", "app_title", self.TITLE)
        self.registry = registry or build_default_registry(get_cli_section("theme"))
        self.composer = RoleNavigatorComposer(self.registry)
        self.navigation = NavigationContainer(self.composer)
        self.router = SessionRouter(
            self.navigation,
            fallback_role=get_cli_setting("navigation", "fallback_role", DEFAULT_ROLE),
        )
        self.session = SessionCoordinator(auth_provider or DemoAuthProvider(), self.router)

        self._root_screen_key: Optional[str] = None
        self._unsubscribe = self.navigation.add_listener(self._on_navigation_changed)

        logger.info("Application initialized")

    def _load_configuration(self) -> None:
        """Load configuration with error handling."""
        try:
            load_cli_config_and_ensure_existence()
            logger.debug("Configuration loaded")
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")

    async def on_mount(self) -> None:
        logger.info("Application mounting")
        initial_route = get_cli_setting("navigation", "initial_route", AUTH_ROUTE)
        if not self.registry.is_root_route(initial_route):
            logger.warning(f"Initial route '{initial_route}' is not a root route, using {AUTH_ROUTE}")
            initial_route = AUTH_ROUTE

        self.navigation.mark_ready(initial_route)
        await self.session.restore()

    def on_unmount(self) -> None:
        self.navigation.mark_unmounted()
        self._unsubscribe()

    # Navigation -> screens

    def _on_navigation_changed(self, state: Dict[str, Any]) -> None:
        self.call_later(self._sync_screens)

    async def _sync_screens(self) -> None:
        """Show the screen for the top root route, or refresh it if it's already shown."""
        top = self.navigation.current_route()
        if top is None:
            return

        if top.key == self._root_screen_key and isinstance(self.screen, BaseAppScreen):
            self.screen.sync_from(top.navigator)
        else:
            screen = self._create_root_screen(top)
            if self._root_screen_key is None:
                await self.push_screen(screen)
            else:
                await self.switch_screen(screen)
            self._root_screen_key = top.key

        self.current_route = self.navigation.focused_route_name() or ""

    def _create_root_screen(self, entry: RouteEntry) -> BaseAppScreen:
        if entry.name == AUTH_ROUTE:
            return AuthScreen(self, entry)
        return RoleAppScreen(self, entry)

    def watch_current_route(self, old_route: str, new_route: str) -> None:
        if old_route != new_route:
            logger.debug(f"Route changed: {old_route or '-'} -> {new_route}")

    # Messages from screens

    @on(NavigateTo)
    def handle_navigate_to(self, message: NavigateTo) -> None:
        self.router.navigate_to(message.route_name, message.params)

    @on(GoBack)
    def handle_go_back(self, message: GoBack) -> None:
        self.router.go_back()

    @on(LogoutRequested)
    async def handle_logout_requested(self, message: LogoutRequested) -> None:
        await self.action_logout()

    @on(LoginRequested)
    async def handle_login_requested(self, message: LoginRequested) -> None:
        if await self.session.login(message.credentials):
            return
        error = self.session.error or "Login failed"
        if isinstance(self.screen, AuthScreen):
            self.screen.show_login_error(error)
        self.notify(error, severity="error")

    # Actions

    def action_back(self) -> None:
        self.router.go_back()

    async def action_logout(self) -> None:
        if not self.session.is_authenticated:
            return
        await self.session.logout()
        self.notify("Signed out")


def run():
    """Run the spark_therapy client."""
    configure_logging()
    app = SparkTherapyApp()
    app.run()


if __name__ == "__main__":
    run()

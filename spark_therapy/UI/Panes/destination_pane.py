# destination_pane.py
# Description: Generic content pane for a navigation destination
#
# Imports
from typing import Any, Dict, Optional, Sequence
#
# Third-Party Imports
from loguru import logger
from rich.markup import escape
from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import Button, Label, Static
#
# Local Imports
from ...navigation.registry import ScreenSpec
from ..Navigation.main_navigation import GoBack, NavigateTo
#
#######################################################################################################################
#
# Classes:

class DestinationPane(Container):
    """
    Placeholder content for a destination.

    Tab destinations list links to the role's secondary screens; secondary
    destinations get a Back button instead.
    """

    DEFAULT_CSS = """
    DestinationPane {
        height: 1fr;
        width: 100%;
        padding: 1 2;
    }

    .destination-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .destination-params {
        color: $text-muted;
        margin-bottom: 1;
    }

    .destination-links {
        height: auto;
        width: 100%;
        layout: horizontal;
    }

    .destination-link, .destination-back {
        margin: 0 1 1 0;
    }
    """

    def __init__(self, spec: ScreenSpec, params: Optional[Dict[str, Any]] = None,
                 links: Sequence[ScreenSpec] = (), is_secondary: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.spec = spec
        self.params = dict(params or {})
        self.links = list(links)
        self.is_secondary = is_secondary

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            title = f"{self.spec.icon} {self.spec.title}" if self.spec.icon else self.spec.title
            yield Label(title, classes="destination-title")
            if self.params:
                details = ", ".join(f"{k}={v}" for k, v in sorted(self.params.items()))
                yield Static(escape(details), classes="destination-params")
            if self.is_secondary:
                yield Button("← Back", id="destination-back", classes="destination-back")
            elif self.links:
                yield Label("More", classes="destination-params")
                with Horizontal(classes="destination-links"):
                    for link in self.links:
                        yield Button(link.title, id=f"link-{link.route_name}", classes="destination-link")

    @on(Button.Pressed, ".destination-link")
    def handle_link(self, event: Button.Pressed) -> None:
        event.stop()
        route_name = (event.button.id or "")[len("link-"):]
        if route_name:
            logger.debug(f"Destination link pressed: {route_name}")
            self.post_message(NavigateTo(route_name))

    @on(Button.Pressed, ".destination-back")
    def handle_back(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(GoBack())

#
# End of destination_pane.py
#######################################################################################################################

"""Destination content panes and component lookup."""

from .component_loader import clear_component_cache, resolve_component
from .destination_pane import DestinationPane

__all__ = [
    'DestinationPane',
    'clear_component_cache',
    'resolve_component',
]

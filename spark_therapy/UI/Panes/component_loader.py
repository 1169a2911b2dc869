"""Lookup of destination components by dotted path."""

import importlib
from typing import Dict, Type

from loguru import logger
from textual.widget import Widget

_COMPONENT_CACHE: Dict[str, Type[Widget]] = {}


def resolve_component(path: str) -> Type[Widget]:
    """
    Import a component from a dotted ``module.ClassName`` path.

    Falls back to DestinationPane if the module or class can't be loaded.
    Components are called with ``spec``, ``params``, ``links`` and
    ``is_secondary`` keyword arguments.
    """
    if path in _COMPONENT_CACHE:
        return _COMPONENT_CACHE[path]

    module_name, _, class_name = path.rpartition(".")
    try:
        module = importlib.import_module(module_name)
        component = getattr(module, class_name)
    except (ImportError, AttributeError, ValueError) as e:
        from .destination_pane import DestinationPane
        logger.warning(f"Failed to load component {path}: {e}. Using DestinationPane.")
        component = DestinationPane

    _COMPONENT_CACHE[path] = component
    return component


def clear_component_cache() -> None:
    _COMPONENT_CACHE.clear()

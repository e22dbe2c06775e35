"""AWS Lambda entry point for ECS task state change events."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from discovery_agent import DriverRegistry, parse_event

from .bootstrap import build_registry
from .config import load_config

LOG = logging.getLogger(__name__)

_REGISTRY: Optional[DriverRegistry] = None


def get_registry() -> DriverRegistry:
    """Bootstrap once per process; configuration errors fail the cold start."""

    global _REGISTRY
    # Left unset on a configuration error, so every later invocation in the
    # same container raises again instead of dropping events.
    if _REGISTRY is None:
        config = load_config()
        logging.getLogger().setLevel(config.runtime.level)
        _REGISTRY = build_registry(config)
    return _REGISTRY


def handle_event(registry: DriverRegistry, event: Mapping[str, Any]) -> None:
    LOG.debug("Received event %s", event.get("id") if isinstance(event, Mapping) else event)
    registry.handle(parse_event(event))


def create_handler(registry: DriverRegistry) -> Callable[[Mapping[str, Any], Any], None]:
    def handler(event: Mapping[str, Any], context: Any) -> None:
        handle_event(registry, event)

    return handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> None:
    handle_event(get_registry(), event)

"""Exception hierarchy raised by the public discovery core."""

from __future__ import annotations


class DiscoveryError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(DiscoveryError):
    """Required configuration is missing or malformed."""


class InvalidInputError(DiscoveryError, ValueError):
    """An event or tag value cannot be interpreted."""


class NotFoundError(DiscoveryError, LookupError):
    """Data needed to register a task is absent."""

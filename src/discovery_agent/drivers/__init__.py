"""Driver adapters exposed to the registry."""

from .base import TaskDriver  # noqa: F401
from .route53_adapter import Route53DriverAdapter, build_route53_adapter  # noqa: F401

__all__ = [
    "Route53DriverAdapter",
    "TaskDriver",
    "build_route53_adapter",
]

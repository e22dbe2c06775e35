"""Public DNS discovery for dynamically placed ECS tasks.

Tasks of a service that should be reachable from the internet share one DNS
name in a Route 53 hosted zone.  Every running task owns its own multi-value
answer A record set under that name, keyed by the task identifier, so clients
resolving the name receive the public address of one of the live tasks.

The package is split along the lines of the work done per event:

* :mod:`public_discovery.address` finds the task's elastic network interface
  and its public address;
* :mod:`public_discovery.tags` reads the ``public-discovery:name`` and
  ``public-discovery:ttl`` tags from the interface or the task;
* :mod:`public_discovery.locator` walks the hosted zone to find the record
  set registered for a task; and
* :class:`public_discovery.driver.PublicDiscoveryDriver` ties them together
  and submits the single upsert or delete per event.
"""

from .driver import ChangeResult, PublicDiscoveryDriver  # noqa: F401

__all__ = ["ChangeResult", "PublicDiscoveryDriver"]

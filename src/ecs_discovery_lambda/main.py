"""Command line entry point replaying task state change events."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, List

from discovery_agent import parse_event
from public_discovery.exceptions import DiscoveryError

from .bootstrap import bootstrap

LOG = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)


def _load_events(source: str) -> List[Any]:
    if source == "-":
        payload = json.load(sys.stdin)
    else:
        payload = json.loads(Path(source).read_text())
    if isinstance(payload, list):
        return payload
    return [payload]


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Apply ECS task state change events to Route 53"
    )
    parser.add_argument(
        "--event",
        action="append",
        required=True,
        metavar="PATH",
        help="JSON file holding one event or a list of events ('-' for stdin)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to an optional YAML configuration file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(None if argv is None else list(argv))
    _setup_logging(args.verbose)

    try:
        registry = bootstrap(args.config)
    except DiscoveryError as exc:
        LOG.error("%s", exc)
        return 1

    for source in args.event:
        try:
            events = _load_events(source)
        except (OSError, json.JSONDecodeError) as exc:
            LOG.error("failed to read events from %s: %s", source, exc)
            return 1

        for event in events:
            try:
                registry.handle(parse_event(event))
            except DiscoveryError as exc:
                LOG.error("%s", exc)
                return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

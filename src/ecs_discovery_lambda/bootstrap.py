"""Build the driver registry from configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import boto3

from discovery_agent import DriverRegistry
from discovery_agent.drivers import build_route53_adapter
from public_discovery.driver import PublicDiscoveryDriver

from .config import AgentConfig, RuntimeConfig, load_config

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class AwsClients:
    ec2: Any
    route53: Any
    ecs: Any = None


def create_clients(config: RuntimeConfig, session: Optional[boto3.session.Session] = None) -> AwsClients:
    session = session or boto3.session.Session(region_name=config.region)
    return AwsClients(
        ec2=session.client("ec2"),
        route53=session.client("route53"),
        ecs=session.client("ecs"),
    )


def build_driver(config: AgentConfig, clients: AwsClients) -> PublicDiscoveryDriver:
    return PublicDiscoveryDriver(
        config.discovery,
        ec2_client=clients.ec2,
        route53_client=clients.route53,
        ecs_client=clients.ecs,
    )


def build_registry(config: AgentConfig, clients: Optional[AwsClients] = None) -> DriverRegistry:
    clients = clients or create_clients(config.runtime)
    registry = DriverRegistry()
    registry.register("route53", build_route53_adapter(build_driver(config, clients)))

    discovery = config.discovery
    LOG.info(
        "Public discovery ready for zone %s (%s), tags read from %s",
        discovery.hosted_zone_id,
        discovery.hosted_zone_name,
        discovery.tag_source.value,
    )
    return registry


def bootstrap(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    clients: Optional[AwsClients] = None,
) -> DriverRegistry:
    """Validate configuration and return a registry ready to handle events."""

    return build_registry(load_config(path, environ), clients)

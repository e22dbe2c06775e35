"""Configuration loader for the discovery runtime.

Values come from an optional YAML file and from the environment, the latter
taking precedence.  The file is looked up from ``--config`` or the
``DISCOVERY_CONFIG_FILE`` variable and may contain two sections::

    discovery:
      hosted_zone_id: Z1R8UBAEXAMPLE
      hosted_zone_name: example.com
      default_ttl: 60
      tag_source: interface
    runtime:
      region: us-east-1
      log_level: INFO

Loading validates everything up front so a misconfigured function fails at
startup instead of on the first event.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from public_discovery.config import (
    DEFAULT_TTL,
    NAME_TAG,
    TTL_TAG,
    DiscoveryConfig,
    TagSourceKind,
)
from public_discovery.exceptions import ConfigurationError

CONFIG_FILE_ENV = "DISCOVERY_CONFIG_FILE"
HOSTED_ZONE_ID_ENV = "HOSTED_ZONE_ID"
HOSTED_ZONE_NAME_ENV = "HOSTED_ZONE_NAME"
DEFAULT_TTL_ENV = "DEFAULT_TTL"
TAG_SOURCE_ENV = "TAG_SOURCE"
LOG_LEVEL_ENV = "LOG_LEVEL"
REGION_ENVS = ("AWS_REGION", "AWS_DEFAULT_REGION")


@dataclass(frozen=True)
class RuntimeConfig:
    region: Optional[str] = None
    log_level: str = "INFO"

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


@dataclass(frozen=True)
class AgentConfig:
    discovery: DiscoveryConfig
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)


def _read_file(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must be a mapping")
    return data


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{name}' section must be a mapping")
    return section


def _required(environ: Mapping[str, str], env_key: str, section: Mapping[str, Any], key: str) -> str:
    value = str(environ.get(env_key) or section.get(key) or "").strip()
    if not value:
        raise ConfigurationError(f"{env_key} environment variable is not set!")
    return value


def _parse_ttl(value: Any) -> int:
    try:
        ttl = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"default TTL must be an integer, got '{value}'") from None
    if ttl < 0:
        raise ConfigurationError(f"default TTL must not be negative, got {ttl}")
    return ttl


def _parse_discovery(section: Mapping[str, Any], environ: Mapping[str, str]) -> DiscoveryConfig:
    zone_id = _required(environ, HOSTED_ZONE_ID_ENV, section, "hosted_zone_id")
    zone_name = _required(environ, HOSTED_ZONE_NAME_ENV, section, "hosted_zone_name")
    if zone_name.endswith("."):
        zone_name = zone_name[:-1]
    if not zone_name:
        raise ConfigurationError(f"{HOSTED_ZONE_NAME_ENV} environment variable is not set!")

    try:
        tag_source = TagSourceKind.parse(
            environ.get(TAG_SOURCE_ENV) or section.get("tag_source", "interface")
        )
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from None

    return DiscoveryConfig(
        hosted_zone_id=zone_id,
        hosted_zone_name=zone_name,
        default_ttl=_parse_ttl(environ.get(DEFAULT_TTL_ENV) or section.get("default_ttl", DEFAULT_TTL)),
        tag_source=tag_source,
        name_tag=str(section.get("name_tag", NAME_TAG)),
        ttl_tag=str(section.get("ttl_tag", TTL_TAG)),
    )


def _parse_runtime(section: Mapping[str, Any], environ: Mapping[str, str]) -> RuntimeConfig:
    region = next((environ[key] for key in REGION_ENVS if environ.get(key)), None)
    log_level = str(environ.get(LOG_LEVEL_ENV) or section.get("log_level", "INFO")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown log level '{log_level}'")
    return RuntimeConfig(region=region or section.get("region"), log_level=log_level)


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AgentConfig:
    if environ is None:
        environ = os.environ

    config_path = path or environ.get(CONFIG_FILE_ENV)
    data = _read_file(Path(config_path)) if config_path else {}

    return AgentConfig(
        discovery=_parse_discovery(_section(data, "discovery"), environ),
        runtime=_parse_runtime(_section(data, "runtime"), environ),
    )

from pathlib import Path

import pytest

from ecs_discovery_lambda.config import load_config
from public_discovery.config import TagSourceKind
from public_discovery.exceptions import ConfigurationError


def test_load_config_from_environment():
    cfg = load_config(
        environ={
            "HOSTED_ZONE_ID": "Z1R8UBAEXAMPLE",
            "HOSTED_ZONE_NAME": "example.com.",
            "AWS_REGION": "us-west-2",
        }
    )

    assert cfg.discovery.hosted_zone_id == "Z1R8UBAEXAMPLE"
    assert cfg.discovery.hosted_zone_name == "example.com"
    assert cfg.discovery.default_ttl == 60
    assert cfg.discovery.tag_source is TagSourceKind.INTERFACE
    assert cfg.discovery.name_tag == "public-discovery:name"
    assert cfg.runtime.region == "us-west-2"
    assert cfg.runtime.log_level == "INFO"


def test_load_config_from_file(tmp_path: Path):
    config_path = tmp_path / "discovery.yaml"
    config_path.write_text(
        """
discovery:
  hosted_zone_id: Z1R8UBAEXAMPLE
  hosted_zone_name: example.com
  default_ttl: 30
  tag_source: task
  ttl_tag: discovery/ttl
runtime:
  region: eu-west-1
  log_level: debug
"""
    )

    cfg = load_config(config_path, environ={})

    assert cfg.discovery.hosted_zone_id == "Z1R8UBAEXAMPLE"
    assert cfg.discovery.default_ttl == 30
    assert cfg.discovery.tag_source is TagSourceKind.TASK
    assert cfg.discovery.ttl_tag == "discovery/ttl"
    assert cfg.runtime.region == "eu-west-1"
    assert cfg.runtime.log_level == "DEBUG"


def test_environment_overrides_file(tmp_path: Path):
    config_path = tmp_path / "discovery.yaml"
    config_path.write_text(
        """
discovery:
  hosted_zone_id: ZFILE
  hosted_zone_name: file.example.com
  default_ttl: 30
"""
    )

    cfg = load_config(
        environ={
            "DISCOVERY_CONFIG_FILE": str(config_path),
            "HOSTED_ZONE_ID": "ZENV",
            "DEFAULT_TTL": "90",
        }
    )

    assert cfg.discovery.hosted_zone_id == "ZENV"
    assert cfg.discovery.hosted_zone_name == "file.example.com"
    assert cfg.discovery.default_ttl == 90


@pytest.mark.parametrize(
    "environ, message",
    [
        ({"HOSTED_ZONE_NAME": "example.com"}, "HOSTED_ZONE_ID environment variable is not set!"),
        ({"HOSTED_ZONE_ID": "Z1R8UBAEXAMPLE"}, "HOSTED_ZONE_NAME environment variable is not set!"),
        ({"HOSTED_ZONE_ID": "  ", "HOSTED_ZONE_NAME": "example.com"}, "HOSTED_ZONE_ID environment variable is not set!"),
        ({"HOSTED_ZONE_ID": "Z1R8UBAEXAMPLE", "HOSTED_ZONE_NAME": "   "}, "HOSTED_ZONE_NAME environment variable is not set!"),
        ({"HOSTED_ZONE_ID": "Z1R8UBAEXAMPLE", "HOSTED_ZONE_NAME": " . "}, "HOSTED_ZONE_NAME environment variable is not set!"),
    ],
)
def test_missing_required_values(environ, message):
    with pytest.raises(ConfigurationError) as excinfo:
        load_config(environ=environ)

    assert str(excinfo.value) == message


def test_blank_values_in_file_are_missing(tmp_path: Path):
    config_path = tmp_path / "discovery.yaml"
    config_path.write_text(
        """
discovery:
  hosted_zone_id: Z1R8UBAEXAMPLE
  hosted_zone_name: "  "
"""
    )

    with pytest.raises(ConfigurationError, match="HOSTED_ZONE_NAME environment variable is not set!"):
        load_config(config_path, environ={})


@pytest.mark.parametrize(
    "extra",
    [
        {"TAG_SOURCE": "container"},
        {"DEFAULT_TTL": "soon"},
        {"DEFAULT_TTL": "-1"},
        {"LOG_LEVEL": "CHATTY"},
    ],
)
def test_invalid_values_are_rejected(extra):
    environ = {"HOSTED_ZONE_ID": "Z1R8UBAEXAMPLE", "HOSTED_ZONE_NAME": "example.com"}
    environ.update(extra)

    with pytest.raises(ConfigurationError):
        load_config(environ=environ)


def test_malformed_file_is_rejected(tmp_path: Path):
    config_path = tmp_path / "discovery.yaml"
    config_path.write_text("discovery: [not, a, mapping]\n")

    with pytest.raises(ConfigurationError, match="'discovery' section must be a mapping"):
        load_config(config_path, environ={})


def test_missing_file_is_rejected(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="Cannot read configuration file"):
        load_config(tmp_path / "absent.yaml", environ={})

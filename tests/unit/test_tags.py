import boto3
import pytest
from botocore.stub import Stubber

from public_discovery.exceptions import InvalidInputError, NotFoundError
from public_discovery.models import NetworkInterface, Tag, parse_tags
from public_discovery.tags import (
    InterfaceTagSource,
    TaskTagSource,
    get_required_tag,
    get_tag,
    parse_ttl,
)

TASK_ARN = "arn:aws:ecs:us-west-2:111122223333:task/FargateCluster/c13b4cb40f1f4fe4a2971f76ae5a47ad"


def test_get_tag_first_match_wins():
    tags = [Tag("public-discovery:name", "first"), Tag("public-discovery:name", "second")]

    assert get_tag("public-discovery:name", tags) == "first"
    assert get_tag("public-discovery:ttl", tags) is None


def test_get_required_tag_reports_context():
    with pytest.raises(NotFoundError) as excinfo:
        get_required_tag("public-discovery:name", [], "Task abc")

    assert str(excinfo.value) == "Task abc does not have the 'public-discovery:name' tag."


def test_parse_tags_accepts_both_spellings():
    tags = parse_tags([{"Key": "a", "Value": "1"}, {"key": "b", "value": "2"}])

    assert tags == (Tag("a", "1"), Tag("b", "2"))


def test_parse_ttl():
    assert parse_ttl(None, 60, "Task abc") == 60
    assert parse_ttl("120", 60, "Task abc") == 120
    assert parse_ttl(" 30 ", 60, "Task abc") == 30

    with pytest.raises(InvalidInputError, match="Task abc has an invalid TTL"):
        parse_ttl("one minute", 60, "Task abc")
    with pytest.raises(InvalidInputError, match="negative"):
        parse_ttl("-5", 60, "Task abc")


def test_interface_tag_source():
    interface = NetworkInterface(
        interface_id="eni-abcd1234",
        public_address="1.2.3.4",
        tags=(Tag("public-discovery:name", "test"),),
    )
    source = InterfaceTagSource(interface)

    assert source.get("public-discovery:name") == "test"
    assert source.require("public-discovery:name", "Task abc") == "test"
    assert source.get("public-discovery:ttl") is None


def test_task_tag_source_lists_tags_once():
    client = boto3.client(
        "ecs",
        region_name="us-west-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    stubber = Stubber(client)
    stubber.add_response(
        "list_tags_for_resource",
        {"tags": [{"key": "public-discovery:name", "value": "test"}, {"key": "public-discovery:ttl", "value": "120"}]},
        {"resourceArn": TASK_ARN},
    )

    with stubber:
        source = TaskTagSource(client, TASK_ARN)
        assert source.get("public-discovery:name") == "test"
        assert source.get("public-discovery:ttl") == "120"

    stubber.assert_no_pending_responses()

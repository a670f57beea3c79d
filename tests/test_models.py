"""Tests for payload serialization and configuration models."""

import json

import pytest
from pydantic import ValidationError

from tana_mcp.client import TanaClient
from tana_mcp.models import (
    DEFAULT_ENDPOINT,
    APIConfiguration,
    APIField,
    APINode,
    APIPlainNode,
    BatchCreatePayload,
    EncodingError,
    FieldAddPayload,
    RenamePayload,
    SuperTag,
    TanaNode,
)


def test_batch_payload_omits_empty_supertags() -> None:
    payload = BatchCreatePayload(
        target_node_id="T",
        nodes=[APIPlainNode(name="a"), APINode(name="b", supertags=[SuperTag(id="x")])],
    )

    assert json.loads(payload.to_json()) == {
        "targetNodeId": "T",
        "nodes": [
            {"name": "a", "description": ""},
            {"name": "b", "description": "", "supertags": [{"id": "x"}]},
        ],
    }


def test_rename_payload_has_no_nodes_key() -> None:
    payload = RenamePayload(target_node_id="T", set_name="New")
    assert json.loads(payload.to_json()) == {"targetNodeId": "T", "setName": "New"}


def test_field_payload_never_has_supertags() -> None:
    payload = FieldAddPayload(target_node_id="T", nodes=[APIField(name="f", description="d")])
    assert json.loads(payload.to_json()) == {
        "targetNodeId": "T",
        "nodes": [{"name": "f", "description": "d"}],
    }


def test_with_supertag_returns_copy() -> None:
    node = APIPlainNode(name="a", supertags=[SuperTag(id="x")])

    tagged = node.with_supertag("y")

    assert [t.id for t in tagged.supertags] == ["x", "y"]
    assert [t.id for t in node.supertags] == ["x"]


def test_tana_node_parses_wire_names() -> None:
    node = TanaNode.model_validate({"name": "N", "description": "D", "nodeId": "X", "extra": 1})
    assert node.node_id == "X"


def test_configuration_is_frozen() -> None:
    config = APIConfiguration(api_token="tok")

    assert config.endpoint == DEFAULT_ENDPOINT
    with pytest.raises(ValidationError):
        config.endpoint = "https://elsewhere.test"  # type: ignore[misc]


def test_configuration_hides_token() -> None:
    config = APIConfiguration(api_token="s3cr3t-value")
    assert "s3cr3t-value" not in repr(config)
    assert config.api_token.get_secret_value() == "s3cr3t-value"


class _UnencodablePayload:
    target_node_id = "T"

    def to_json(self) -> str:
        raise ValueError("cannot serialize")


def test_encoding_failure_raises_encoding_error() -> None:
    client = TanaClient.from_token("tok")

    with pytest.raises(EncodingError, match="cannot serialize") as exc_info:
        client.send(_UnencodablePayload())  # type: ignore[arg-type]

    assert isinstance(exc_info.value.__cause__, ValueError)

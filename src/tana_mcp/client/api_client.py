"""Tana API client - node, tag and field operations."""

from collections.abc import Sequence

import httpx

from ..models import (
    ATTR_DEF_TEMPLATE_ID,
    CORE_TEMPLATE_ID,
    SCHEMA_NODE_ID,
    APIConfiguration,
    APIField,
    APINode,
    APIPlainNode,
    BatchCreatePayload,
    EmptyResponseError,
    FieldAddPayload,
    RenamePayload,
    TanaNode,
)
from .api_client_core import TanaClientCore


class TanaClient(TanaClientCore):
    """Client for Tana's addToNodeV2 endpoint.

    Every public method sends exactly one request. Nothing is retried;
    a call either returns what the server created or raises.
    """

    @classmethod
    def from_token(
        cls,
        token: str,
        endpoint: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "TanaClient":
        """Build a client from a raw token and an optional endpoint override."""
        config = APIConfiguration(api_token=token, endpoint=endpoint)
        return cls(config, transport=transport)

    @staticmethod
    def _first(children: list[TanaNode], operation: str) -> TanaNode:
        if not children:
            raise EmptyResponseError(f"{operation}: server returned no nodes")
        return children[0]

    def create_field_definitions(self, fields: Sequence[APIPlainNode]) -> list[TanaNode]:
        """Create attribute definitions under the schema root in one batch.

        Each field is tagged with the attribute-definition template before
        sending. The caller's objects are left untouched.

        Returns:
            Created nodes, in the order the server listed them.
        """
        payload = BatchCreatePayload(
            target_node_id=SCHEMA_NODE_ID,
            nodes=[field.with_supertag(ATTR_DEF_TEMPLATE_ID) for field in fields],
        )
        return list(self.send(payload))

    def create_tag_definition(self, node: APIPlainNode) -> str:
        """Create a supertag under the schema root and return its node id."""
        payload = BatchCreatePayload(
            target_node_id=SCHEMA_NODE_ID,
            nodes=[node.with_supertag(CORE_TEMPLATE_ID)],
        )
        return self._first(self.send(payload), "create_tag_definition").node_id

    def create_node(self, node: APINode, target_node_id: str) -> TanaNode:
        """Create a single node under ``target_node_id``."""
        payload = BatchCreatePayload(target_node_id=target_node_id, nodes=[node])
        return self._first(self.send(payload), "create_node")

    def set_node_name(self, new_name: str, target_node_id: str) -> TanaNode:
        """Rename ``target_node_id`` to ``new_name``."""
        payload = RenamePayload(target_node_id=target_node_id, set_name=new_name)
        return self._first(self.send(payload), "set_node_name")

    def add_field(self, field: APIField, target_node_id: str) -> TanaNode:
        """Attach a name/description field to ``target_node_id``."""
        payload = FieldAddPayload(target_node_id=target_node_id, nodes=[field])
        return self._first(self.send(payload), "add_field")

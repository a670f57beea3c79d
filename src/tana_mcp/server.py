"""Tana MCP server implementation using FastMCP."""

import logging
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from .client import TanaClient
from .config import ServerConfig, setup_logging
from .models import APIField, APINode, APIPlainNode, SuperTag, TanaNode

logger = logging.getLogger(__name__)

# Global client instance
_client: TanaClient | None = None


def get_client() -> TanaClient:
    """Get the global Tana client instance."""
    if _client is None:
        raise RuntimeError("Tana client not initialized. Server not started properly.")
    return _client


@asynccontextmanager
async def lifespan(_app: FastMCP):  # type: ignore[no-untyped-def]
    """Manage server lifecycle."""
    global _client

    logger.info("Starting Tana MCP server")

    config = ServerConfig()  # type: ignore[call-arg]
    _client = TanaClient(config.get_api_config())
    logger.info(f"Tana client initialized with endpoint: {_client.endpoint}")

    try:
        yield
    finally:
        logger.info("Shutting down Tana MCP server")
        _client.close()
        _client = None


mcp = FastMCP(
    "Tana MCP Server",
    instructions="MCP server for adding nodes, supertags and fields to a Tana workspace",
    lifespan=lifespan,
)


def _tags(supertag_ids: list[str] | None) -> list[SuperTag]:
    return [SuperTag(id=tag_id) for tag_id in supertag_ids or []]


@mcp.tool(
    name="tana_create_field_definitions",
    description="Create field (attribute) definitions in the workspace schema",
)
def create_field_definitions(fields: list[APIPlainNode]) -> list[TanaNode]:
    """Create several field definitions in one request.

    Args:
        fields: Name/description pairs; each is tagged as an attribute definition

    Returns:
        The created field nodes
    """
    return get_client().create_field_definitions(fields)


@mcp.tool(name="tana_create_tag_definition", description="Create a supertag in the workspace schema")
def create_tag_definition(
    name: str,
    description: str = "",
    supertag_ids: list[str] | None = None,
) -> str:
    """Create a supertag and return its node id."""
    node = APIPlainNode(name=name, description=description, supertags=_tags(supertag_ids))
    return get_client().create_tag_definition(node)


@mcp.tool(name="tana_create_node", description="Create a node under a target node")
def create_node(
    name: str,
    target_node_id: str,
    description: str = "",
    supertag_ids: list[str] | None = None,
) -> TanaNode:
    """Create one node, optionally tagged.

    Args:
        name: Node text
        target_node_id: Parent node the new node is added to
        description: Node description
        supertag_ids: Ids of existing supertags to apply
    """
    node = APINode(name=name, description=description, supertags=_tags(supertag_ids))
    return get_client().create_node(node, target_node_id)


@mcp.tool(name="tana_set_node_name", description="Rename an existing node")
def set_node_name(new_name: str, target_node_id: str) -> TanaNode:
    return get_client().set_node_name(new_name, target_node_id)


@mcp.tool(name="tana_add_field", description="Attach a field to an existing node")
def add_field(name: str, target_node_id: str, description: str = "") -> TanaNode:
    return get_client().add_field(APIField(name=name, description=description), target_node_id)


def main() -> None:
    """Console entry point: run the server over stdio."""
    setup_logging(ServerConfig().log_level)  # type: ignore[call-arg]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()

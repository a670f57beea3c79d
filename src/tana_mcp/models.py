"""Data models and exceptions for the Tana Input API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator, model_serializer

DEFAULT_ENDPOINT = "https://europe-west1-tagr-prod.cloudfunctions.net/addToNodeV2"

# Fixed workspace identifiers understood by the endpoint
SCHEMA_NODE_ID = "SCHEMA"
CORE_TEMPLATE_ID = "SYS_T01"
ATTR_DEF_TEMPLATE_ID = "SYS_T02"


class TanaAPIError(Exception):
    """Base class for every error raised by the Tana client."""


class EncodingError(TanaAPIError):
    """Request payload could not be serialized to JSON."""


class NetworkError(TanaAPIError):
    """Request could not be sent or no response was received."""


class ServerError(TanaAPIError):
    """Endpoint answered with a status other than 200/201.

    The message is the raw response body, verbatim, so the caller sees the
    server's own diagnostic text.
    """

    def __init__(self, body: str, status_code: int | None = None):
        super().__init__(body)
        self.body = body
        self.status_code = status_code


class AuthenticationError(ServerError):
    """Endpoint rejected the bearer token (HTTP 401)."""


class DecodingError(TanaAPIError):
    """Successful response whose body is not the expected JSON shape."""


class EmptyResponseError(DecodingError):
    """A single-node operation received an empty ``children`` list."""


class APIConfiguration(BaseModel):
    """Token and endpoint used by the client. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    api_token: SecretStr
    endpoint: str = DEFAULT_ENDPOINT
    debug: bool = False

    @field_validator("endpoint", mode="before")
    @classmethod
    def _default_when_empty(cls, value: Any) -> Any:
        # Only an empty override falls back to the service URL
        if value is None or value == "":
            return DEFAULT_ENDPOINT
        return value


class SuperTag(BaseModel):
    """Reference to an existing tag/template node."""

    id: str


class APIPlainNode(BaseModel):
    """A node to create: name, description and optional supertags."""

    name: str
    description: str = ""
    supertags: list[SuperTag] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _omit_empty_supertags(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if not data.get("supertags"):
            data.pop("supertags", None)
        return data

    def with_supertag(self, tag_id: str) -> "APIPlainNode":
        """Return a copy with ``tag_id`` appended to the supertags."""
        return self.model_copy(update={"supertags": [*self.supertags, SuperTag(id=tag_id)]})


class APINode(APIPlainNode):
    """Arbitrary node created under a caller-chosen target."""


class APIField(BaseModel):
    """Name/description pair attached to a node as a field."""

    name: str
    description: str = ""


class TanaNode(BaseModel):
    """Node record returned by the endpoint after a mutation."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    description: str = ""
    node_id: str = Field(alias="nodeId")

    @field_validator("name", "description", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class AddToNodeResponse(BaseModel):
    """Success body: ``{"children": [...]}``."""

    children: list[TanaNode] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def _null_as_no_children(cls, value: Any) -> Any:
        return [] if value is None else value


class _Payload(BaseModel):
    """Shared base for the request bodies sent to the endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    target_node_id: str = Field(alias="targetNodeId")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class BatchCreatePayload(_Payload):
    """Create one or more nodes (optionally tagged) under the target."""

    nodes: list[APIPlainNode]


class RenamePayload(_Payload):
    """Rename the target node."""

    set_name: str = Field(alias="setName")


class FieldAddPayload(_Payload):
    """Attach fields to the target node."""

    nodes: list[APIField]


Payload = BatchCreatePayload | RenamePayload | FieldAddPayload

"""REST runtime abstractions."""

from .changeset import cast
from .encoding import encode_query, flatten_params
from .http_client import HTTPClient
from .runner import (
    ListAdapter,
    ModelAdapter,
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
)
from .transport import RESTTransport, raise_for_response

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "ModelAdapter",
    "ListAdapter",
    "cast",
    "encode_query",
    "flatten_params",
    "raise_for_response",
]

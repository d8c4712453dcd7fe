"""Value types shared by the network services."""

from .endpoint import EndpointDescriptor, HeaderMap, NetworkRequest
from .errors import CodeLocation, InvalidParameter, InvalidURL, NetworkError, NotFound
from .result import Result

__all__ = [
    "CodeLocation",
    "EndpointDescriptor",
    "HeaderMap",
    "InvalidParameter",
    "InvalidURL",
    "NetworkError",
    "NetworkRequest",
    "NotFound",
    "Result",
]

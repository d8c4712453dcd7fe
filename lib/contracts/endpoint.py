"""Endpoint descriptor and outbound request models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import quote, unquote, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field
from requests.structures import CaseInsensitiveDict


HeaderMap = CaseInsensitiveDict

_PATH_SAFE = "/:@!$&'()*+,;=~"
_QUERY_SAFE = _PATH_SAFE + "?%"


class EndpointDescriptor(BaseModel):
    """URL components registered under a code in the configuration store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    scheme: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = Field(default=None, ge=0, le=65535)
    path: str = ""
    query: Optional[str] = None

    @classmethod
    def from_url(cls, text: str) -> "EndpointDescriptor":
        """Split ``text`` into its components.

        Credentials embedded in the URL have no component to live in and are
        rejected rather than dropped.
        """

        parts = urlsplit(text)
        if parts.username is not None or parts.password is not None:
            raise ValueError("endpoint URLs must not carry credentials")
        return cls(
            scheme=parts.scheme or None,
            host=parts.hostname or None,
            port=parts.port,
            path=unquote(parts.path),
            query=parts.query or None,
        )

    @property
    def url(self) -> Optional[str]:
        """Compose the components, or ``None`` when they do not form a URL."""

        if not (self.scheme or self.host or self.path):
            return None
        if self.host:
            if not self.scheme:
                return None
            if self.path and not self.path.startswith("/"):
                return None
        elif self.port is not None or self.path.startswith("//"):
            # "//x" without a host would be read back as host "x"
            return None
        netloc = self.host or ""
        if ":" in netloc and not netloc.startswith("["):
            netloc = f"[{netloc}]"
        if netloc and self.port is not None:
            netloc = f"{netloc}:{self.port}"
        path = quote(self.path, safe=_PATH_SAFE)
        query = quote(self.query or "", safe=_QUERY_SAFE)
        return urlunsplit((self.scheme or "", netloc, path, query, ""))


@dataclass
class NetworkRequest:
    """Outbound request handed to the transport: a URL and its headers."""

    url: str
    headers: HeaderMap = field(default_factory=HeaderMap)


__all__ = ["EndpointDescriptor", "HeaderMap", "NetworkRequest"]

"""Error kinds returned by the network configuration and router services."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any


DOMAIN_PREFACE = "com.blanknetwork."


@dataclass(frozen=True)
class CodeLocation:
    """Where an error was detected.

    ``detail`` follows the ``"file,line,function"`` layout used in the error
    reports so that sinks can group errors by call site.
    """

    component: str
    detail: str = ""

    domain_preface = DOMAIN_PREFACE

    @property
    def domain(self) -> str:
        return f"{self.domain_preface}{self.component}"

    @classmethod
    def capture(cls, owner: Any, depth: int = 1) -> "CodeLocation":
        """Build a location for the caller ``depth`` frames up the stack."""

        frame = inspect.currentframe()
        for _ in range(depth):
            frame = frame.f_back
        code = frame.f_code
        detail = f"{code.co_filename},{frame.f_lineno},{code.co_name}"
        name = owner if isinstance(owner, str) else type(owner).__name__
        return cls(component=name, detail=detail)

    def __str__(self) -> str:
        return f"{self.domain}[{self.detail}]"


@dataclass(eq=False)
class NetworkError(Exception):
    """Base error for the network layer."""

    reason: str
    location: CodeLocation | None = None
    code: str = field(default="network_error", init=False)
    reported: bool = field(default=False, init=False, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.reason)

    def __str__(self) -> str:
        return f"{self.code}:{self.reason}"


@dataclass(eq=False)
class InvalidParameter(NetworkError):
    parameter: str = ""
    code: str = field(default="invalid_parameter", init=False)


@dataclass(eq=False)
class NotFound(NetworkError):
    key: str = ""
    code: str = field(default="not_found", init=False)


@dataclass(eq=False)
class InvalidURL(NetworkError):
    code: str = field(default="invalid_url", init=False)


__all__ = [
    "CodeLocation",
    "DOMAIN_PREFACE",
    "InvalidParameter",
    "InvalidURL",
    "NetworkError",
    "NotFound",
]

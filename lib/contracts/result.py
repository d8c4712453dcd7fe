"""Explicit success/failure values returned by the network services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import NetworkError


T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a :class:`NetworkError`, never both."""

    value: Optional[T] = None
    error: Optional[NetworkError] = None

    @classmethod
    def success(cls, value: T = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: NetworkError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


__all__ = ["Result"]

"""
Domain entity: outcome of a single outbound read.
Zero external dependencies: pure Python dataclass only.

Adapters never raise past their boundary; they return a FetchResult that is
either a success carrying data or a failure carrying the logged cause.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    data: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T) -> "FetchResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: str) -> "FetchResult[T]":
        return cls(error=error)

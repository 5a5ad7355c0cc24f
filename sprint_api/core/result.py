from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from sprint_api.core.errors import AppError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation that can fail with a client-facing error.

    Exactly one of ``value`` / ``error`` is meaningful; ``error`` decides.
    """

    value: T | None = None
    error: AppError | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: AppError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value

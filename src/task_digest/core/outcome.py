# src/task_digest/core/outcome.py

from __future__ import annotations

"""
Explicit success/failure value for I/O boundaries.

Fetch, publish, open-form and update never raise into the caller. They return an
Outcome instead, so each caller decides (and visibly writes down) what to do with a
failure: substitute a default, log and stop, or ignore.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Outcome(Generic[T]):
    value: T | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> Outcome[T]:
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: BaseException) -> Outcome[T]:
        return cls(value=None, error=error)

    def value_or(self, default: T) -> T:
        if self.error is not None or self.value is None:
            return default
        return self.value

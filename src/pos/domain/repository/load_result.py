"""Result wrapper for repository loads that may hit corrupt storage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pos.domain.exceptions import StorageCorruptError

T = TypeVar("T")


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """The loaded value, plus the corruption error if a fallback was used.

    When ``error`` is set, ``value`` holds the fallback (seed catalog or
    empty history), never partially parsed data.
    """

    value: T
    error: StorageCorruptError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

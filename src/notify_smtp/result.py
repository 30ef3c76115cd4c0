"""Generic provider outcome."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class NotificationResult:
    """Immutable outcome of a provider send call."""

    is_success: bool
    errors: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls) -> NotificationResult:
        """Create a successful result."""
        return cls(is_success=True)

    @classmethod
    def failure(cls, errors: Iterable[str]) -> NotificationResult:
        """Create a failed result carrying *errors*."""
        return cls(is_success=False, errors=tuple(errors))

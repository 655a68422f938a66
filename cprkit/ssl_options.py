"""SSL verification option."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VerifySsl:
    """Whether peer certificates are verified; on by default."""

    verify: bool = True

    def __bool__(self) -> bool:
        return self.verify
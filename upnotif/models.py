from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Verdict(str, Enum):
    UP = "UP"
    DOWN = "DOWN"

    def __str__(self) -> str:
        return self.value

    @property
    def emoji(self) -> str:
        return "✅" if self is Verdict.UP else "❌"


@dataclass(frozen=True)
class Transition:
    """Outcome of one endpoint's check within a single cycle."""

    url: str
    verdict: Verdict
    changed: bool

from __future__ import annotations

from typing import Dict, Optional

from ..models import Verdict


class StatusLedger:
    """Last observed verdict per endpoint, kept for the lifetime of the process."""

    def __init__(self) -> None:
        self._statuses: Dict[str, Verdict] = {}

    def evaluate(self, url: str, verdict: Verdict) -> bool:
        previous = self._statuses.get(url)
        self._statuses[url] = verdict
        return previous is None or previous is not verdict

    def get(self, url: str) -> Optional[Verdict]:
        return self._statuses.get(url)

    def snapshot(self) -> Dict[str, Verdict]:
        return dict(self._statuses)

    def __contains__(self, url: object) -> bool:
        return url in self._statuses

    def __len__(self) -> int:
        return len(self._statuses)

from __future__ import annotations

from typing import Iterable

from .models import Transition, Verdict

STARTUP_HEADER = "🔍 *URL Monitor Started*\nInitial status check:"
CHANGES_HEADER = "🔔 *URL Status Changes*"


def status_line(url: str, verdict: Verdict) -> str:
    return f"{verdict.emoji} {url} is {verdict}"


def change_line(url: str, verdict: Verdict) -> str:
    return f"{verdict.emoji} {url} is now {verdict}"


def startup_message(lines: Iterable[str]) -> str:
    return "\n".join([STARTUP_HEADER, *lines])


def changes_message(lines: Iterable[str]) -> str:
    return "\n".join([CHANGES_HEADER, *lines])


def change_lines(transitions: Iterable[Transition]) -> list[str]:
    return [change_line(t.url, t.verdict) for t in transitions if t.changed]

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

import aiohttp

from ..config import Settings
from .classifier import is_success


log = logging.getLogger("upnotif.notifier")

WEBHOOK_TIMEOUT = aiohttp.ClientTimeout(total=30)


class NotificationError(RuntimeError):
    """Raised when a message could not be delivered."""


class Notifier(Protocol):
    async def send(self, message: str) -> None: ...


class ConsoleNotifier:
    """Writes messages to the log instead of delivering them anywhere."""

    async def send(self, message: str) -> None:
        log.info("[TEST MODE] Slack notification: %s", message)


class WebhookNotifier:
    def __init__(self, session: aiohttp.ClientSession, webhook_url: str):
        self.session = session
        self.webhook_url = webhook_url

    async def send(self, message: str) -> None:
        payload = {"text": message}
        try:
            async with self.session.post(
                self.webhook_url, json=payload, timeout=WEBHOOK_TIMEOUT
            ) as response:
                if not is_success(response.status):
                    raise NotificationError(f"Slack webhook returned status: {response.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as exc:
            raise NotificationError(str(exc) or exc.__class__.__name__) from exc


def build_notifier(settings: Settings, session: Optional[aiohttp.ClientSession]) -> Notifier:
    if settings.test_mode:
        return ConsoleNotifier()
    if session is None:
        raise ValueError("A client session is required for webhook delivery")
    return WebhookNotifier(session, settings.slack_webhook)

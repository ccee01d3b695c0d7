from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

import aiohttp

from ..config import Settings
from ..messages import change_lines, changes_message, startup_message, status_line
from ..models import Transition, Verdict
from ..utils.ticker import Ticker
from .classifier import check_status
from .ledger import StatusLedger
from .notifier import NotificationError, Notifier


log = logging.getLogger("upnotif.monitor")

Probe = Callable[[aiohttp.ClientSession, str], Awaitable[Verdict]]


class UrlMonitor:
    def __init__(
        self,
        settings: Settings,
        session: aiohttp.ClientSession,
        notifier: Notifier,
        probe: Probe = check_status,
    ):
        self.settings = settings
        self.session = session
        self.notifier = notifier
        self.probe = probe
        self.ledger = StatusLedger()

    async def check_all_urls(self) -> List[Transition]:
        results = []
        for url in self.settings.urls:
            verdict = await self.probe(self.session, url)
            changed = self.ledger.evaluate(url, verdict)
            results.append(Transition(url=url, verdict=verdict, changed=changed))
        return results

    async def report_initial_status(self) -> str:
        log.info("Starting URL monitoring...")
        lines = []
        for result in await self.check_all_urls():
            line = status_line(result.url, result.verdict)
            log.info("%s", line)
            lines.append(line)
        message = startup_message(lines)
        await self.notify(message, "initial status")
        return message

    async def poll_once(self) -> Optional[str]:
        """Run one steady-state cycle; returns the message sent, if any."""
        lines = change_lines(await self.check_all_urls())
        if not lines:
            return None
        for line in lines:
            log.info("Status change: %s", line)
        message = changes_message(lines)
        await self.notify(message, "status change")
        return message

    async def notify(self, message: str, what: str) -> bool:
        try:
            await self.notifier.send(message)
        except NotificationError as exc:
            if self.settings.test_mode:
                log.error("Failed to log %s: %s", what, exc)
            else:
                log.error("Failed to send %s to Slack: %s", what, exc)
            return False
        return True

    async def run(self, ticker: Optional[Ticker] = None) -> None:
        await self.report_initial_status()
        log.info(
            "Monitoring %s URLs every %s seconds...",
            len(self.settings.urls),
            self.settings.interval_seconds,
        )
        # created after the startup report so its first tick is one interval away
        ticker = ticker or Ticker(self.settings.interval_seconds)
        while True:
            await ticker.wait()
            try:
                await self.poll_once()
            except asyncio.CancelledError:
                raise
            except Exception:
                log.exception("Status check cycle failed")

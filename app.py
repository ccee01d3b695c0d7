import asyncio
import logging
import os
import sys

import aiohttp
from dotenv import load_dotenv

from upnotif.config import ConfigError, Settings, get_settings
from upnotif.services.classifier import PROBE_TIMEOUT
from upnotif.services.monitor import UrlMonitor
from upnotif.services.notifier import build_notifier


log = logging.getLogger("upnotif.app")


def configure_logging() -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


async def serve(settings: Settings) -> None:
    async with aiohttp.ClientSession(timeout=PROBE_TIMEOUT) as session:
        monitor = UrlMonitor(settings, session, build_notifier(settings, session))
        await monitor.run()


def main() -> None:
    load_dotenv(override=False)
    configure_logging()

    try:
        settings = get_settings()
    except ConfigError as exc:
        log.error("Configuration error: %s", exc)
        sys.exit(1)

    log.info("Configuration loaded successfully")
    log.info("URLs to monitor: %s", list(settings.urls))
    log.info("Check interval: %s seconds", settings.interval_seconds)
    if settings.test_mode:
        log.info(
            "Running in TEST MODE - notifications will be logged to console instead of sent to Slack"
        )

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        log.info("Interrupted, exiting")


if __name__ == "__main__":
    main()

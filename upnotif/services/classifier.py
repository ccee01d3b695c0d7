from __future__ import annotations

import asyncio
import logging

import aiohttp

from ..models import Verdict


log = logging.getLogger("upnotif.classifier")

PROBE_TIMEOUT = aiohttp.ClientTimeout(total=30)


def is_success(status: int) -> bool:
    return 200 <= status < 300


async def check_status(session: aiohttp.ClientSession, url: str) -> Verdict:
    """Probe ``url`` once with a GET request.

    Any failure, including a non-2xx status, resolves to ``Verdict.DOWN``;
    nothing is raised to the caller.
    """

    try:
        async with session.get(url, timeout=PROBE_TIMEOUT) as response:
            if is_success(response.status):
                return Verdict.UP
            log.debug("Probe of %s returned HTTP %s", url, response.status)
            return Verdict.DOWN
    except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as exc:
        log.debug("Probe of %s failed: %r", url, exc)
        return Verdict.DOWN

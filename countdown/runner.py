"""Run a countdown with its ticker and input listener."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from .exceptions import CountdownException, TickerError
from .listener import InputListener
from .timer import Timer

_LOGGER = logging.getLogger(__name__)


async def run_countdown(timer: Timer, reader: asyncio.StreamReader) -> None:
    """Count down while listening for pause requests on reader.

    Returns once the ticker has printed its final notice. Errors of
    either task are raised to the caller.
    """
    _LOGGER.debug("Running %r", timer)
    ticker = timer.start()
    listener = InputListener(timer, reader, timeout=timer.tick_interval)

    try:
        await listener.run(ticker)
    except BaseException:
        ticker.cancel()
        with suppress(asyncio.CancelledError):
            await ticker
        raise

    try:
        await ticker
    except CountdownException:
        raise
    except Exception as ex:
        raise TickerError(f"Countdown ticker failed: {ex}") from ex

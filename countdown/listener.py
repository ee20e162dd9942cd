"""Input listener pausing and resuming the countdown.

Pressing enter toggles the pause flag of the :class:`~countdown.Timer`.
Reading is bounded by a timeout so the listener notices a finished
countdown even when no input arrives.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import IO

# When support for cpython older than 3.11 is dropped
# async_timeout can be replaced with asyncio.timeout
from async_timeout import timeout as asyncio_timeout

from .exceptions import InputError
from .timer import TICK_INTERVAL, Timer

_LOGGER = logging.getLogger(__name__)

TOGGLE_TRIGGER = b"\n"
READ_SIZE = 4096


def _feed_until_eof(reader: asyncio.StreamReader, read: Callable[[], bytes]) -> None:
    """Feed everything a non blocking source holds into the reader."""
    try:
        while data := read():
            reader.feed_data(data)
    except (OSError, ValueError) as ex:
        raise InputError(f"Unable to read from stdin: {ex}") from ex
    reader.feed_eof()


@asynccontextmanager
async def open_stdin_reader(
    stream: IO | None = None,
) -> AsyncIterator[asyncio.StreamReader]:
    """Yield a stream reader fed from stdin.

    Terminals and pipes are read by the event loop whenever data is
    available. Regular files and in-memory streams cannot block and are
    read completely up front.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None:
        raise InputError("Standard input is not available")

    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()

    try:
        fd = stream.fileno()
    except (OSError, ValueError):
        # io.UnsupportedOperation, the stream has no file descriptor
        buffer = getattr(stream, "buffer", stream)
        _feed_until_eof(reader, lambda: buffer.read(READ_SIZE))
        yield reader
        return

    def _on_readable() -> None:
        try:
            data = os.read(fd, READ_SIZE)
        except BlockingIOError:
            return
        except OSError as ex:
            loop.remove_reader(fd)
            reader.set_exception(InputError(f"Unable to read from stdin: {ex}"))
            return
        if data:
            reader.feed_data(data)
        else:
            loop.remove_reader(fd)
            reader.feed_eof()

    try:
        loop.add_reader(fd, _on_readable)
    except PermissionError:
        # Regular files cannot be polled but never block
        _feed_until_eof(reader, lambda: os.read(fd, READ_SIZE))
        yield reader
        return
    except (NotImplementedError, OSError, ValueError) as ex:
        raise InputError(f"Unable to read from stdin: {ex}") from ex

    try:
        yield reader
    finally:
        loop.remove_reader(fd)


class InputListener:
    """Reads toggle requests for a timer."""

    def __init__(
        self,
        timer: Timer,
        reader: asyncio.StreamReader,
        *,
        timeout: timedelta = TICK_INTERVAL,
    ) -> None:
        self._timer = timer
        self._reader = reader
        self._timeout = timeout.total_seconds()

    @property
    def closed(self) -> bool:
        """Return True if no more input can arrive."""
        return self._reader.at_eof()

    async def read_trigger(self) -> bool:
        """Wait up to the timeout for a line and toggle the timer on a trigger.

        Returns True if the timer was toggled.
        """
        try:
            async with asyncio_timeout(self._timeout):
                line = await self._reader.readline()
        except asyncio.TimeoutError:
            return False
        except ValueError as ex:
            # Over-long line, the reader already dropped it
            _LOGGER.debug("Ignoring input: %s", ex)
            return False
        except OSError as ex:
            raise InputError(f"Unable to read from stdin: {ex}") from ex

        if line != TOGGLE_TRIGGER:
            if line:
                _LOGGER.debug("Ignoring input %r", line)
            return False

        self._timer.toggle()
        return True

    async def run(self, ticker: asyncio.Task | None = None) -> None:
        """Listen for toggle requests until the countdown is done."""
        while not await self._timer.done():
            if ticker is not None and ticker.done():
                return
            if self.closed:
                await asyncio.sleep(self._timeout)
                continue
            await self.read_trigger()
            if self.closed:
                _LOGGER.debug("Reached end of stdin, no longer listening")

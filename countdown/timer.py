"""Countdown timer and its ticker task.

The :class:`Timer` owns the remaining duration and the pause flag.
The remaining duration is only changed by the ticker while holding
:attr:`Timer.lock`, the pause flag is flipped by whoever reads user input.

The remaining time is written to the output whenever a whole second is
reached, followed by a final ``done`` once nothing is left to count down.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import timedelta
from enum import Enum
from typing import TextIO

import asyncclick as click

from .exceptions import OutputError
from .humantime import format_duration
from .timerconfig import TimerConfig

_LOGGER = logging.getLogger(__name__)

TICK_INTERVAL = timedelta(milliseconds=200)
ZERO = timedelta(0)


class TimerState(Enum):
    """State of a countdown."""

    Running = "running"
    Paused = "paused"
    Done = "done"


class Timer:
    """Countdown timer shared between the ticker and the input listener."""

    def __init__(
        self,
        config: TimerConfig,
        *,
        output: TextIO | None = None,
        tick_interval: timedelta = TICK_INTERVAL,
    ) -> None:
        self._config = config
        self._output = output if output is not None else sys.stdout
        self._tick_interval = tick_interval
        self._remaining = config.duration
        self._paused = False
        self._elapsed_ticks = 0
        self.lock = asyncio.Lock()

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} {format_duration(self._remaining)}"
            f" ({self.state.value})>"
        )

    @property
    def config(self) -> TimerConfig:
        """Return the timer configuration."""
        return self._config

    @property
    def tick_interval(self) -> timedelta:
        """Return the time subtracted on every tick."""
        return self._tick_interval

    @property
    def paused(self) -> bool:
        """Return True if the countdown is paused."""
        return self._paused

    @property
    def elapsed_ticks(self) -> int:
        """Return the number of ticks that advanced the countdown."""
        return self._elapsed_ticks

    @property
    def state(self) -> TimerState:
        """Return the current state of the countdown."""
        if self._remaining == ZERO:
            return TimerState.Done
        return TimerState.Paused if self._paused else TimerState.Running

    def toggle(self) -> bool:
        """Pause a running countdown or resume a paused one."""
        self._paused = not self._paused
        _LOGGER.debug("Countdown %s", "paused" if self._paused else "resumed")
        return self._paused

    async def remaining(self) -> timedelta:
        """Return the remaining duration."""
        async with self.lock:
            return self._remaining

    async def done(self) -> bool:
        """Return True once the remaining duration has reached zero."""
        async with self.lock:
            return self._remaining == ZERO

    def _write(self, message: str) -> None:
        try:
            click.echo(message, file=self._output, nl=False)
        except (OSError, ValueError) as ex:
            raise OutputError(f"Unable to write to output: {ex}") from ex

    async def tick(self) -> bool:
        """Advance the countdown by one tick.

        Prints the remaining time whenever a whole second boundary is
        reached. Returns False when there is nothing left to count down.
        """
        async with self.lock:
            if self._remaining == ZERO:
                return False

            if not self._paused:
                if self._remaining.microseconds == 0:
                    mode = self._config.display_mode
                    self._write(
                        f"{mode.line_start}{format_duration(self._remaining)}"
                        f"{mode.line_end:>3}"
                    )
                self._remaining = max(self._remaining - self._tick_interval, ZERO)
                self._elapsed_ticks += 1

        return True

    async def run(self) -> None:
        """Count down until the remaining duration reaches zero."""
        loop = asyncio.get_running_loop()
        interval = self._tick_interval.total_seconds()
        _LOGGER.debug("Starting countdown from %s", format_duration(self._remaining))

        next_tick = loop.time()
        while await self.tick():
            next_tick += interval
            await asyncio.sleep(max(next_tick - loop.time(), 0))

        self._write(f"{self._config.display_mode.line_start}done\n")
        _LOGGER.debug("Countdown finished after %s ticks", self._elapsed_ticks)

    def start(self) -> asyncio.Task:
        """Start the ticker as a background task."""
        return asyncio.create_task(self.run(), name="countdown-ticker")

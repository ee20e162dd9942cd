"""Configuration for a single countdown run.

The configuration is built once from the command line and never changes
while the timer is running:

>>> from countdown import DisplayMode, TimerConfig
>>> config = TimerConfig(minutes=1, seconds=30)
>>> config.duration
datetime.timedelta(seconds=90)
>>> config.to_dict()
{'hours': 0, 'minutes': 1, 'seconds': 30, 'display_mode': 'scroll'}
>>> TimerConfig.from_values(0, 0, 5, line_mode=True).display_mode
<DisplayMode.Line: 'line'>
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from mashumaro import DataClassDictMixin

from .exceptions import CountdownException


class DisplayMode(Enum):
    """How updates are written to the terminal."""

    #: Every update is printed on its own line
    Scroll = "scroll"
    #: Every update overwrites the current terminal line
    Line = "line"

    @property
    def line_start(self) -> str:
        """Prefix written before every update."""
        return "\r" if self is DisplayMode.Line else ""

    @property
    def line_end(self) -> str:
        """Suffix written after every update."""
        return "" if self is DisplayMode.Line else "\n"


@dataclass(frozen=True)
class TimerConfig(DataClassDictMixin):
    """Class to represent the parameters of a countdown."""

    #: Hours to count down
    hours: int = 0
    #: Minutes to count down
    minutes: int = 0
    #: Seconds to count down
    seconds: int = 0
    #: Scroll or overwrite updates
    display_mode: DisplayMode = DisplayMode.Scroll

    def __post_init__(self) -> None:
        for name in ("hours", "minutes", "seconds"):
            if getattr(self, name) < 0:
                raise CountdownException(
                    f"Invalid value for {name}: {getattr(self, name)}, "
                    "must not be negative"
                )

    @property
    def duration(self) -> timedelta:
        """Total duration of the countdown."""
        return timedelta(
            seconds=self.seconds + self.minutes * 60 + self.hours * 3600
        )

    @staticmethod
    def from_values(
        hours: int,
        minutes: int,
        seconds: int,
        line_mode: bool = False,
    ) -> TimerConfig:
        """Return a timer config from command line values."""
        return TimerConfig(
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            display_mode=DisplayMode.Line if line_mode else DisplayMode.Scroll,
        )

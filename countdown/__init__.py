"""Terminal countdown timer with pause and resume.

The countdown is driven by a :class:`Timer` counting down in the background
while an :class:`InputListener` toggles its pause flag on every enter key::

>>> from countdown import Timer, TimerConfig, open_stdin_reader, run_countdown
>>> timer = Timer(TimerConfig(minutes=1))
>>> async with open_stdin_reader() as reader:
>>>     await run_countdown(timer, reader)

Errors are raised as `CountdownException` subclasses.
"""

from countdown.exceptions import (
    CountdownException,
    InputError,
    OutputError,
    TickerError,
)
from countdown.humantime import format_duration
from countdown.listener import TOGGLE_TRIGGER, InputListener, open_stdin_reader
from countdown.runner import run_countdown
from countdown.timer import TICK_INTERVAL, Timer, TimerState
from countdown.timerconfig import DisplayMode, TimerConfig
from countdown.version import __version__

__all__ = [
    "Timer",
    "TimerState",
    "TimerConfig",
    "DisplayMode",
    "InputListener",
    "open_stdin_reader",
    "run_countdown",
    "format_duration",
    "TICK_INTERVAL",
    "TOGGLE_TRIGGER",
    "CountdownException",
    "OutputError",
    "InputError",
    "TickerError",
    "__version__",
]

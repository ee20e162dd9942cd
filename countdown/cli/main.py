"""Main module for cli tool."""

from __future__ import annotations

import logging
from typing import Any

import asyncclick as click
from rich.console import Console
from rich.logging import RichHandler

from countdown.listener import open_stdin_reader
from countdown.runner import run_countdown
from countdown.timer import Timer
from countdown.timerconfig import TimerConfig

from .common import CatchAllExceptions

_LOGGER = logging.getLogger(__name__)


@click.command(cls=CatchAllExceptions(click.Command))
@click.option(
    "-H",
    "--hours",
    envvar="COUNTDOWN_HOURS",
    default=0,
    show_default=True,
    type=click.IntRange(min=0),
    help="Hours to count down.",
)
@click.option(
    "-m",
    "--minutes",
    envvar="COUNTDOWN_MINUTES",
    default=0,
    show_default=True,
    type=click.IntRange(min=0),
    help="Minutes to count down.",
)
@click.option(
    "-s",
    "--seconds",
    envvar="COUNTDOWN_SECONDS",
    default=0,
    show_default=True,
    type=click.IntRange(min=0),
    help="Seconds to count down.",
)
@click.option(
    "-l",
    "--line-mode",
    envvar="COUNTDOWN_LINE_MODE",
    default=False,
    is_flag=True,
    help="Print the remaining time on a single line.",
)
@click.option(
    "-d",
    "--debug",
    envvar="COUNTDOWN_DEBUG",
    default=False,
    is_flag=True,
    help="Print debug output",
)
@click.version_option(package_name="python-countdown")
async def cli(hours, minutes, seconds, line_mode, debug):
    """Count down the given time in the terminal.

    Press enter to pause or resume the countdown.
    """
    logging_config: dict[str, Any] = {
        "level": logging.DEBUG if debug else logging.INFO,
        "format": "%(message)s",
        "handlers": [RichHandler(console=Console(stderr=True), show_time=False)],
    }
    logging.basicConfig(**logging_config)

    config = TimerConfig.from_values(hours, minutes, seconds, line_mode)
    _LOGGER.debug("Using configuration %s", config.to_dict())

    timer = Timer(config)
    async with open_stdin_reader() as reader:
        await run_countdown(timer, reader)

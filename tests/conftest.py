from __future__ import annotations

import asyncio
import io
import os
from unittest.mock import patch

import pytest
from asyncclick.testing import CliRunner

from countdown import Timer, TimerConfig


class BrokenOutput(io.StringIO):
    """Output stream failing like a closed pipe."""

    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")


def make_reader(data: bytes = b"", *, eof: bool = True) -> asyncio.StreamReader:
    """Return a stream reader already holding data."""
    reader = asyncio.StreamReader()
    if data:
        reader.feed_data(data)
    if eof:
        reader.feed_eof()
    return reader


def updates(output: str) -> list[str]:
    """Return the printed updates without padding."""
    return [line.strip() for line in output.replace("\r", "\n").splitlines() if line]


@pytest.fixture(autouse=True, scope="session")
def asyncio_sleep_fixture():  # noqa: PT004
    """Patch sleep to prevent tests actually waiting."""
    orig_asyncio_sleep = asyncio.sleep

    async def _asyncio_sleep(*_, **__):
        await orig_asyncio_sleep(0)

    with patch("asyncio.sleep", side_effect=_asyncio_sleep):
        yield


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def timer_factory(output):
    """Return a factory for timers writing to the output fixture."""

    def _timer(line_mode=False, **kwargs):
        config = TimerConfig.from_values(
            kwargs.pop("hours", 0),
            kwargs.pop("minutes", 0),
            kwargs.pop("seconds", 0),
            line_mode,
        )
        return Timer(config, output=output, **kwargs)

    return _timer


@pytest.fixture
def runner():
    """Runner fixture that unsets the COUNTDOWN_ environment variables for tests."""
    countdown_vars = {k: None for k in os.environ if k.startswith("COUNTDOWN_")}
    return CliRunner(env=countdown_vars)

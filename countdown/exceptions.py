"""python-countdown exceptions."""

from __future__ import annotations


class CountdownException(Exception):
    """Base exception for countdown errors."""


class OutputError(CountdownException):
    """Exception for failures writing the remaining time to the terminal."""


class InputError(CountdownException):
    """Exception for failures reading toggle requests from stdin."""


class TickerError(CountdownException):
    """Exception for a ticker task that terminated abnormally."""

    def __repr__(self) -> str:
        cause = self.__cause__.__repr__() if self.__cause__ else ""
        return f"{self.__class__.__name__}({cause})"

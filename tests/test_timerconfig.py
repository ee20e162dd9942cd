from datetime import timedelta

import pytest

from countdown import CountdownException, DisplayMode, TimerConfig


@pytest.mark.parametrize(
    ("hours", "minutes", "seconds"),
    [(0, 0, 0), (0, 0, 59), (0, 1, 0), (1, 2, 3), (0, 90, 90), (100, 0, 1)],
)
def test_duration(hours, minutes, seconds):
    config = TimerConfig(hours=hours, minutes=minutes, seconds=seconds)
    assert config.duration == timedelta(seconds=seconds + 60 * minutes + 3600 * hours)


@pytest.mark.parametrize("field", ["hours", "minutes", "seconds"])
def test_negative_values(field):
    with pytest.raises(CountdownException, match=f"Invalid value for {field}"):
        TimerConfig(**{field: -1})


def test_defaults():
    config = TimerConfig()
    assert config.duration == timedelta(0)
    assert config.display_mode is DisplayMode.Scroll


@pytest.mark.parametrize(
    ("line_mode", "mode", "line_start", "line_end"),
    [
        pytest.param(False, DisplayMode.Scroll, "", "\n", id="scroll"),
        pytest.param(True, DisplayMode.Line, "\r", "", id="line"),
    ],
)
def test_display_mode(line_mode, mode, line_start, line_end):
    config = TimerConfig.from_values(0, 1, 0, line_mode)
    assert config.display_mode is mode
    assert mode.line_start == line_start
    assert mode.line_end == line_end


def test_serialization():
    config = TimerConfig.from_values(1, 2, 3, line_mode=True)
    config_dict = config.to_dict()
    assert config_dict == {
        "hours": 1,
        "minutes": 2,
        "seconds": 3,
        "display_mode": "line",
    }
    assert TimerConfig.from_dict(config_dict) == config

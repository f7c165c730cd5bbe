import io

import pytest
from rich.console import Console

from mathdrill.services.prompts import AnswerReader
from mathdrill.services.tracker import ProcessTotals


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedStream:
    """readline() source that replays ``lines`` and optionally ticks a clock."""

    def __init__(self, lines, clock=None, latency=0.0):
        self._lines = list(lines)
        self._clock = clock
        self._latency = latency

    def readline(self) -> str:
        if self._clock is not None:
            self._clock.advance(self._latency)
        if not self._lines:
            return ""
        return self._lines.pop(0) + "\n"


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def console(out):
    return Console(file=out, color_system=None, highlight=False, width=200)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def totals():
    return ProcessTotals(wall_clock=FakeClock(5000.0))


@pytest.fixture
def make_reader(console):
    def _make(lines, clock=None, latency=0.0):
        return AnswerReader(console, stream=ScriptedStream(lines, clock, latency))
    return _make

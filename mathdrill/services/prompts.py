"""
Blocking line prompts.

Every prompt consumes exactly one line and trims it.  Numeric prompts
re-ask without limit until the line parses; there is no retry ceiling.
End of input surfaces as ``EOFError`` for the caller to handle.
"""

import logging
import math
import re
from typing import IO, Optional

from rich.console import Console

from mathdrill.core.practice_config import (
    PracticeConfig,
    build_practice_config,
    parse_integer,
)

logger = logging.getLogger(__name__)

#: Plain ASCII decimal, optional exponent.  Rejects "nan", "inf" and "1_0".
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_decimal(text: str) -> float:
    text = text.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a decimal: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite decimal: {text!r}")
    return value


class AnswerReader:
    """Reads trimmed answers from stdin (or ``stream``) via a rich console."""

    def __init__(self, console: Console, stream: Optional[IO[str]] = None):
        self.console = console
        self._stream = stream

    def read_line(self, prompt: str) -> str:
        line = self.console.input(prompt, markup=False, stream=self._stream)
        # input() raises EOFError itself; readline() signals EOF with ""
        if self._stream is not None and line == "":
            raise EOFError
        return line.strip()

    def read_int(self, prompt: str = "Your answer: ") -> int:
        while True:
            text = self.read_line(prompt)
            try:
                return parse_integer(text)
            except ValueError:
                logger.debug("Rejected integer answer %r", text)
                self.console.print("Please enter a valid number!")

    def read_float(self, prompt: str = "Your answer (as decimal): ") -> float:
        while True:
            text = self.read_line(prompt)
            try:
                return parse_decimal(text)
            except ValueError:
                logger.debug("Rejected decimal answer %r", text)
                self.console.print("Please enter a valid decimal number!")


def prompt_practice_config(reader: AnswerReader) -> PracticeConfig:
    """Ask for a question count and a time limit; at least one ends up set."""
    console = reader.console
    console.print()
    console.print("=== Practice Configuration ===", style="bold bright_cyan", markup=False)
    console.print("(At least one of these must be set)")

    num_text = reader.read_line("Enter number of questions (press Enter for unlimited): ")
    time_text = reader.read_line("Enter time limit in minutes (press Enter for no limit): ")

    config, defaulted = build_practice_config(num_text, time_text)
    if defaulted:
        console.print("Setting default 10 minutes.", style="bold bright_magenta")
    logger.info(
        "Practice config: num_questions=%s time_limit=%s",
        config.num_questions, config.time_limit,
    )
    return config

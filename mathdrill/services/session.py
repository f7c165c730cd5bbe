"""
Practice session runner.

A session moves through::

    AWAITING_CONFIG → RUNNING → (TIME_EXPIRED | QUESTION_LIMIT_REACHED) → SUMMARIZED

The stop check is a poll evaluated before each question: the time limit
first, then the question count.  A question in progress is never cut short,
so a session can overrun its time limit by one answer's latency.

:class:`PracticeSession` owns the loop, the per-session stats and the
process-wide totals bookkeeping.  Subclasses only implement :meth:`ask`,
which shows one question, reads an answer and reports whether it was right.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import numpy as np
from rich.console import Console

from mathdrill import display
from mathdrill.core.kelly import (
    KellyQuestion,
    feedback_band,
    generate_kelly_question,
    is_within_tolerance,
)
from mathdrill.core.practice_config import PracticeConfig
from mathdrill.core.questions import QuestionGenerator, make_rng
from mathdrill.services.prompts import AnswerReader
from mathdrill.services.tracker import ProcessTotals, get_process_totals

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    AWAITING_CONFIG = "awaiting_config"
    RUNNING = "running"
    TIME_EXPIRED = "time_expired"
    QUESTION_LIMIT_REACHED = "question_limit_reached"
    SUMMARIZED = "summarized"


@dataclass
class SessionStats:
    asked: int = 0
    correct: int = 0
    elapsed: float = 0.0


class PracticeSession(ABC):
    """Base loop shared by every drill type."""

    title: str = "Practice"
    #: Header override; defaults to "<title> Practice".
    banner: Optional[str] = None

    def __init__(
        self,
        config: PracticeConfig,
        reader: AnswerReader,
        *,
        rng: Optional[np.random.Generator] = None,
        totals: Optional[ProcessTotals] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.reader = reader
        self.console: Console = reader.console
        self.rng = rng if rng is not None else make_rng()
        self.totals = totals if totals is not None else get_process_totals()
        self.clock = clock
        self.stats = SessionStats()
        self.state = SessionState.AWAITING_CONFIG
        self._started_at = 0.0

    @abstractmethod
    def ask(self, number: int) -> bool:
        """Present question ``number``, read the answer, print feedback."""

    def print_banner(self) -> None:
        display.heading(self.console, self.banner or f"{self.title} Practice")

    def _elapsed(self) -> float:
        return self.clock() - self._started_at

    def _stop_state(self) -> Optional[SessionState]:
        limit = self.config.time_limit
        if limit is not None and self._elapsed() >= limit:
            return SessionState.TIME_EXPIRED
        num = self.config.num_questions
        if num is not None and self.stats.asked >= num:
            return SessionState.QUESTION_LIMIT_REACHED
        return None

    def run(self) -> SessionStats:
        self._started_at = self.clock()
        self.state = SessionState.RUNNING
        logger.info("Starting %s session: %s", self.title, self.config)

        self.print_banner()
        if self.config.time_limit is not None:
            self.console.print(f"Time limit: {self.config.time_limit_minutes} minutes")

        while True:
            stop = self._stop_state()
            if stop is not None:
                self.state = stop
                break
            self.stats.asked += 1
            self.totals.record_asked()
            if self.ask(self.stats.asked):
                self.stats.correct += 1
                self.totals.record_correct()

        if self.state is SessionState.TIME_EXPIRED:
            self.console.print()
            self.console.print("Time's up!", style="bold yellow")

        self.stats.elapsed = self._elapsed()
        self.print_summary()
        self.state = SessionState.SUMMARIZED
        logger.info(
            "%s session ended (%s): %d/%d correct in %.1fs",
            self.title, self.state.value, self.stats.correct,
            self.stats.asked, self.stats.elapsed,
        )
        return self.stats

    def print_summary(self) -> None:
        self.console.print()
        self.console.print(
            display.score_message(self.stats.correct, self.config.num_questions),
            style="bold bright_magenta",
        )
        self.console.print(f"Time taken: {self.stats.elapsed:.1f} seconds")

    def question_label(self, number: int) -> str:
        return f"[bold bright_green]Question {number}:[/]"


class ArithmeticSession(PracticeSession):
    """Exact-match integer drill driven by a question generator."""

    def __init__(
        self,
        title: str,
        generator: QuestionGenerator,
        config: PracticeConfig,
        reader: AnswerReader,
        banner: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(config, reader, **kwargs)
        self.title = title
        self.banner = banner
        self.generator = generator

    def ask(self, number: int) -> bool:
        question = self.generator(self.rng)
        logger.debug("Question %d: %s", number, question)

        self.console.print()
        self.console.print(f"{self.question_label(number)} What is {question.prompt_text()}?")
        answer = self.reader.read_int()

        if answer == question.correct_answer:
            display.correct(self.console)
            return True
        self.console.print(
            f"[bold bright_red]Wrong! The correct answer is[/] {question.correct_answer}"
        )
        return False


class KellySession(PracticeSession):
    """Estimate the Kelly fraction; scored by absolute tolerance."""

    title = "Kelly Bet"

    def __init__(
        self,
        config: PracticeConfig,
        reader: AnswerReader,
        generator: Callable[[np.random.Generator], KellyQuestion] = generate_kelly_question,
        **kwargs,
    ):
        super().__init__(config, reader, **kwargs)
        self.generator = generator

    def print_banner(self) -> None:
        super().print_banner()
        self.console.print("Try to calculate the optimal Kelly bet fraction.")
        self.console.print("(Enter your answer as a decimal, e.g., 0.25 for 25%)")

    def ask(self, number: int) -> bool:
        question = self.generator(self.rng)
        logger.debug("Question %d: %s", number, question)

        self.console.print()
        self.console.print(self.question_label(number))
        self.console.print(f"Decimal Odds: {question.decimal_odds:.2f}")
        self.console.print(f"Win Probability: {question.win_probability:.2f}")
        answer = self.reader.read_float()

        if is_within_tolerance(answer, question.correct_fraction):
            display.correct(self.console)
            return True

        band = feedback_band(answer - question.correct_fraction)
        self.console.print(
            f"[bold bright_red]Wrong! The correct Kelly fraction is[/] "
            f"[{display.BAND_STYLES[band]}]{question.correct_fraction:.3f}[/]"
        )
        return False

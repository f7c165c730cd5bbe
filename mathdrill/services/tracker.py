"""
Process-wide cumulative totals.

Every session, whatever its type, records each asked and each correct
question here.  The interrupt handler reads the totals to print a final
summary for the whole process, not just the current session.

Python runs signal handlers in the main thread between bytecodes, so each
counter update below is atomic with respect to the handler.  The handler
only ever takes a read-only :class:`TotalsSnapshot`.  No lock is used: if the
main code held one when the signal arrived, the handler would block forever.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class TotalsSnapshot:
    total_questions: int
    correct_answers: int
    session_start: Optional[float]

    @property
    def accuracy_pct(self) -> float:
        if self.total_questions == 0:
            return 0.0
        return self.correct_answers / self.total_questions * 100.0


class ProcessTotals:
    """Counters spanning every session of the process.

    ``session_start`` is wall-clock time (``time.time``) of the first
    question asked in the process.
    """

    def __init__(self, wall_clock: Callable[[], float] = time.time):
        self._wall_clock = wall_clock
        self.total_questions = 0
        self.correct_answers = 0
        self.session_start: Optional[float] = None

    def record_asked(self) -> None:
        if self.session_start is None:
            self.session_start = self._wall_clock()
        self.total_questions += 1

    def record_correct(self) -> None:
        self.correct_answers += 1

    def snapshot(self) -> TotalsSnapshot:
        return TotalsSnapshot(
            total_questions=self.total_questions,
            correct_answers=self.correct_answers,
            session_start=self.session_start,
        )


# ---------------------------------------------------------------------------
# Singleton
# ---------------------------------------------------------------------------

_totals: Optional[ProcessTotals] = None


def get_process_totals() -> ProcessTotals:
    global _totals
    if _totals is None:
        _totals = ProcessTotals()
    return _totals


def reset_process_totals() -> ProcessTotals:
    """Replace the singleton with fresh counters (tests only)."""
    global _totals
    _totals = ProcessTotals()
    return _totals

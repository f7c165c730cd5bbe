"""
Process-wide interrupt handling.

``SIGINT`` (Ctrl-C) ends the program from anywhere, including the middle of
a blocking prompt.  Before exiting with status 0 the handler prints a summary
of every question asked during the process, timed from the first question
via the wall clock.  If nothing was asked it exits silently.
"""

import logging
import signal
import sys
import time
from typing import Callable

from rich.console import Console

from mathdrill.services.tracker import ProcessTotals, TotalsSnapshot

logger = logging.getLogger(__name__)


class InterruptSetupError(RuntimeError):
    """The SIGINT handler could not be installed."""


def print_totals_summary(console: Console, snapshot: TotalsSnapshot, now: float) -> None:
    elapsed = 0.0
    if snapshot.session_start is not None:
        elapsed = max(now - snapshot.session_start, 0.0)
    console.print()
    console.print()
    console.print("=== Session Summary ===", style="bold bright_cyan", markup=False)
    console.print(f"Total questions: {snapshot.total_questions}")
    console.print(f"Correct answers: {snapshot.correct_answers}")
    console.print(f"Accuracy: {snapshot.accuracy_pct:.1f}%")
    console.print(f"Total time: {elapsed:.1f} seconds")


def exit_with_summary(
    totals: ProcessTotals,
    console: Console,
    clock: Callable[[], float] = time.time,
) -> None:
    """Print the process summary (if anything was asked) and exit 0."""
    snapshot = totals.snapshot()
    logger.info(
        "Exiting after %d questions (%d correct)",
        snapshot.total_questions, snapshot.correct_answers,
    )
    if snapshot.total_questions > 0:
        print_totals_summary(console, snapshot, clock())
    sys.exit(0)


def make_interrupt_handler(
    totals: ProcessTotals,
    console: Console,
    clock: Callable[[], float] = time.time,
):
    def handler(signum, frame):
        exit_with_summary(totals, console, clock)

    return handler


def install_interrupt_handler(
    totals: ProcessTotals,
    console: Console,
    clock: Callable[[], float] = time.time,
) -> None:
    handler = make_interrupt_handler(totals, console, clock)
    try:
        signal.signal(signal.SIGINT, handler)
    except (ValueError, OSError) as exc:
        logger.critical("Error setting Ctrl-C handler: %s", exc)
        raise InterruptSetupError(f"Error setting Ctrl-C handler: {exc}") from exc
    logger.debug("SIGINT handler installed")

"""Terminal output helpers.

All styled text goes through a ``rich`` :class:`~rich.console.Console` so
tests can substitute one writing to a ``StringIO`` with colour disabled.
"""

from typing import IO, Optional

from rich.console import Console

from mathdrill.core.kelly import FeedbackBand

BAND_STYLES = {
    FeedbackBand.FAR: "bold bright_red",
    FeedbackBand.MODERATE: "bold bright_yellow",
    FeedbackBand.CLOSE: "bold bright_green",
}


def make_console(file: Optional[IO[str]] = None) -> Console:
    # highlight=False keeps rich from recolouring numbers in plain messages
    return Console(file=file, highlight=False)


def heading(console: Console, text: str, style: str = "bold bright_blue") -> None:
    console.print()
    console.print(f"=== {text} ===", style=style, markup=False)


def correct(console: Console) -> None:
    console.print("Correct! ✓", style="bold bright_green")


def score_message(correct_count: int, num_questions: Optional[int]) -> str:
    if num_questions is None:
        return f"You got {correct_count} correct!"
    return f"You got {correct_count}/{num_questions} correct!"

"""
Math Practice App — interactive menu and process bootstrap.

Run with::

    mathdrill                # or: python -m mathdrill.main
    mathdrill --seed 42 -v   # reproducible questions, INFO logging on stderr

Environment (``.env`` is loaded if present):

    MATHDRILL_LOG_LEVEL   logging level name, default WARNING
    MATHDRILL_SEED        integer seed for the question generators
"""

import argparse
import logging
import os
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from dotenv import load_dotenv

from mathdrill.core.questions import (
    generate_addition_question,
    generate_division_question,
    generate_mixed_question,
    generate_multiplication_question,
    generate_subtraction_question,
    make_rng,
)
from mathdrill.display import make_console
from mathdrill.services.interrupt import (
    InterruptSetupError,
    exit_with_summary,
    install_interrupt_handler,
)
from mathdrill.services.prompts import AnswerReader, prompt_practice_config
from mathdrill.services.session import ArithmeticSession, KellySession, PracticeSession
from mathdrill.services.tracker import ProcessTotals, get_process_totals

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

QUIT_CHOICE = "7"


def _arithmetic(title, generator, banner=None):
    def factory(config, reader, **kwargs) -> PracticeSession:
        return ArithmeticSession(title, generator, config, reader, banner=banner, **kwargs)
    return factory


#: Menu key → (label, session factory).
MENU: Dict[str, Tuple[str, Callable[..., PracticeSession]]] = {
    "1": ("Multiplication Tables", _arithmetic("Multiplication", generate_multiplication_question)),
    "2": ("Addition Practice", _arithmetic("Addition", generate_addition_question)),
    "3": ("Subtraction Practice", _arithmetic("Subtraction", generate_subtraction_question)),
    "4": ("Division Practice", _arithmetic("Division", generate_division_question)),
    "5": ("Mixed Practice (All Operations)", _arithmetic(
        "Mixed", generate_mixed_question, banner="Mixed Practice (All Operations)",
    )),
    "6": ("Kelly Bet Practice", KellySession),
}


def print_menu(console) -> None:
    console.print()
    console.print("=== Math Practice App ===", style="bold bright_green", markup=False)
    for key, (label, _) in MENU.items():
        console.print(f"{key}. {label}")
    console.print(f"{QUIT_CHOICE}. Quit")


def run_menu(
    reader: AnswerReader,
    rng: np.random.Generator,
    totals: ProcessTotals,
) -> int:
    """Dispatch menu choices until Quit.  Returns the exit code."""
    console = reader.console
    while True:
        print_menu(console)
        try:
            choice = reader.read_line(f"\nChoose an option (1-{QUIT_CHOICE}): ")
        except EOFError:
            choice = QUIT_CHOICE

        if choice == QUIT_CHOICE:
            console.print("Goodbye!", style="bold bright_yellow")
            return 0

        entry = MENU.get(choice)
        if entry is None:
            console.print("Invalid choice! Please try again.")
            continue

        label, factory = entry
        logger.info("Menu choice %s: %s", choice, label)
        try:
            config = prompt_practice_config(reader)
            factory(config, reader, rng=rng, totals=totals).run()
        except EOFError:
            logger.info("End of input during %s", label)
            exit_with_summary(totals, console)


def _seed_from_env() -> Optional[int]:
    raw = os.getenv("MATHDRILL_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer MATHDRILL_SEED=%r", raw)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Interactive arithmetic and Kelly-criterion practice drills."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the question generators for a reproducible run.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log at INFO level to stderr.",
    )
    args = parser.parse_args(argv)

    level = "INFO" if args.verbose else os.getenv("MATHDRILL_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.basicConfig(level=level, format=LOG_FORMAT)

    seed = args.seed if args.seed is not None else _seed_from_env()
    console = make_console()
    totals = get_process_totals()

    try:
        install_interrupt_handler(totals, console)
    except InterruptSetupError as exc:
        raise SystemExit(str(exc))

    return run_menu(AnswerReader(console), make_rng(seed), totals)


if __name__ == "__main__":
    raise SystemExit(main())

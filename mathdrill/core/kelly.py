"""Kelly criterion estimation drill — fraction math, scoring and feedback.

All functions here are **pure**: no I/O, no logging.

The Kelly criterion maximises the expected logarithm of wealth for a
win/loss bet.  With decimal odds ``d`` the profit per unit staked is
``b = d − 1``; with win probability ``p`` and loss probability ``q = 1 − p``
the closed-form solution (Kelly 1956) is::

    f*  =  (b · p − q) / b                                   (1)

A negative ``f*`` means the bet has negative expectation; the drill floors
it at zero because the correct answer is then "do not bet".

Design decisions
----------------
* Scoring is an **estimation** check, not arithmetic: an answer within
  :data:`KELLY_TOLERANCE` (absolute) of ``f*`` counts as correct.
* Feedback on a wrong answer is banded by how close the guess was, using
  :data:`MAX_ERROR` as the point where an answer counts as completely off.
  The bands only drive presentation, but the thresholds are fixed.

Run tests with::

    pytest tests/test_kelly.py -v
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

import numpy as np

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

#: Decimal odds are drawn from ``[ODDS_MIN, ODDS_MAX)``.
ODDS_MIN: Final[float] = 1.5
ODDS_MAX: Final[float] = 5.0

#: Win probabilities are drawn from ``[WIN_PROB_MIN, WIN_PROB_MAX)``.
WIN_PROB_MIN: Final[float] = 0.2
WIN_PROB_MAX: Final[float] = 0.8

#: Absolute tolerance for a correct estimate.
KELLY_TOLERANCE: Final[float] = 0.05

#: Error at or beyond which an answer is treated as entirely wrong.
MAX_ERROR: Final[float] = 0.20

#: Accuracy band boundaries, where ``accuracy = 1 − min(diff / MAX_ERROR, 1)``.
FAR_BAND_LIMIT: Final[float] = 0.33
MODERATE_BAND_LIMIT: Final[float] = 0.66


# ---------------------------------------------------------------------------
# Kelly fraction
# ---------------------------------------------------------------------------


def kelly_fraction(win_prob: float, decimal_odds: float) -> float:
    """Full Kelly fraction for a simple win/loss bet, floored at zero.

    Args:
        win_prob: Probability of winning, in ``[0, 1]``.
        decimal_odds: Total return per unit staked, stake included.  Must be
            strictly greater than 1.0, otherwise there is no profit to win.

    Returns:
        ``max((b·p − q) / b, 0)`` with ``b = decimal_odds − 1``.

    Raises:
        ValueError: If ``win_prob`` is outside ``[0, 1]`` or
            ``decimal_odds <= 1.0``.

    Examples::

        kelly_fraction(0.6, 2.0)   →  0.2
        kelly_fraction(0.3, 2.0)   →  0.0   (negative EV → 0)
    """
    if not (0.0 <= win_prob <= 1.0):
        raise ValueError(f"win_prob must be in [0, 1], got {win_prob!r}.")
    if decimal_odds <= 1.0:
        raise ValueError(
            f"decimal_odds must be > 1.0 (no profit otherwise), got {decimal_odds!r}."
        )

    b = decimal_odds - 1.0
    q = 1.0 - win_prob
    return max((b * win_prob - q) / b, 0.0)


@dataclass(frozen=True)
class KellyQuestion:
    """A market to size: odds, win probability, and the true Kelly fraction."""

    decimal_odds: float
    win_probability: float
    correct_fraction: float

    @classmethod
    def from_market(cls, decimal_odds: float, win_probability: float) -> "KellyQuestion":
        return cls(
            decimal_odds=decimal_odds,
            win_probability=win_probability,
            correct_fraction=kelly_fraction(win_probability, decimal_odds),
        )


def generate_kelly_question(rng: np.random.Generator) -> KellyQuestion:
    decimal_odds = float(rng.uniform(ODDS_MIN, ODDS_MAX))
    win_probability = float(rng.uniform(WIN_PROB_MIN, WIN_PROB_MAX))
    return KellyQuestion.from_market(decimal_odds, win_probability)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def is_within_tolerance(
    answer: float, correct: float, tolerance: float = KELLY_TOLERANCE
) -> bool:
    return abs(answer - correct) <= tolerance


class FeedbackBand(str, Enum):
    FAR = "far"
    MODERATE = "moderate"
    CLOSE = "close"


def feedback_band(diff: float) -> FeedbackBand:
    """Classify how far off a wrong estimate was.

    ``diff`` is the absolute error.  Errors of :data:`MAX_ERROR` or more
    saturate to zero accuracy.
    """
    accuracy = 1.0 - min(abs(diff) / MAX_ERROR, 1.0)
    if accuracy < FAR_BAND_LIMIT:
        return FeedbackBand.FAR
    if accuracy < MODERATE_BAND_LIMIT:
        return FeedbackBand.MODERATE
    return FeedbackBand.CLOSE

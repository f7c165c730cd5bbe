"""Arithmetic question generators.

Every generator is **pure** given its random source: it receives a
``numpy.random.Generator`` and returns an immutable :class:`Question`.
No I/O, no logging.

Ranges are closed-open, matching ``Generator.integers(low, high)``:

* Multiplication: both operands in ``[2, 13)``.
* Addition: both operands in ``[1, 100)``.
* Subtraction: minuend in ``[2, 100)``, subtrahend in ``[1, minuend)``,
  so the result is non-negative and strictly below the minuend.
* Division: divisor and multiplier in ``[1, 13)``; the dividend is
  their product, so every division is exact.

Run tests with::

    pytest tests/test_questions.py -v
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Optional

import numpy as np

# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

MULTIPLICATION_MIN: Final[int] = 2
MULTIPLICATION_MAX: Final[int] = 13

ADDITION_MIN: Final[int] = 1
ADDITION_MAX: Final[int] = 100

#: A minuend of 1 would leave ``[1, 1)`` for the subtrahend, an empty range.
SUBTRACTION_MIN: Final[int] = 2
SUBTRACTION_MAX: Final[int] = ADDITION_MAX

DIVISION_MAX_DIVISOR: Final[int] = 13
DIVISION_MAX_MULTIPLIER: Final[int] = 13


class Operator(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "×"
    DIV = "÷"


@dataclass(frozen=True)
class Question:
    """One arithmetic prompt and its exact answer."""

    operand1: int
    operand2: int
    operator: Operator
    correct_answer: int

    def prompt_text(self) -> str:
        return f"{self.operand1} {self.operator.value} {self.operand2}"


QuestionGenerator = Callable[[np.random.Generator], Question]


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return the random source used by every generator.

    ``seed=None`` draws fresh OS entropy; pass an int for a reproducible
    question stream.
    """
    return np.random.default_rng(seed)


def _draw(rng: np.random.Generator, low: int, high: int) -> int:
    return int(rng.integers(low, high))


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


def generate_multiplication_question(rng: np.random.Generator) -> Question:
    a = _draw(rng, MULTIPLICATION_MIN, MULTIPLICATION_MAX)
    b = _draw(rng, MULTIPLICATION_MIN, MULTIPLICATION_MAX)
    return Question(a, b, Operator.MUL, a * b)


def generate_addition_question(rng: np.random.Generator) -> Question:
    a = _draw(rng, ADDITION_MIN, ADDITION_MAX)
    b = _draw(rng, ADDITION_MIN, ADDITION_MAX)
    return Question(a, b, Operator.ADD, a + b)


def generate_subtraction_question(rng: np.random.Generator) -> Question:
    a = _draw(rng, SUBTRACTION_MIN, SUBTRACTION_MAX)
    b = _draw(rng, 1, a)
    return Question(a, b, Operator.SUB, a - b)


def generate_division_question(rng: np.random.Generator) -> Question:
    divisor = _draw(rng, 1, DIVISION_MAX_DIVISOR)
    multiplier = _draw(rng, 1, DIVISION_MAX_MULTIPLIER)
    return Question(divisor * multiplier, divisor, Operator.DIV, multiplier)


#: Mixed practice picks uniformly from these.
MIXED_GENERATORS: Final[tuple[QuestionGenerator, ...]] = (
    generate_multiplication_question,
    generate_addition_question,
    generate_subtraction_question,
    generate_division_question,
)


def generate_mixed_question(rng: np.random.Generator) -> Question:
    generator = MIXED_GENERATORS[_draw(rng, 0, len(MIXED_GENERATORS))]
    return generator(rng)

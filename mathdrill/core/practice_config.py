"""Per-session stopping policy.

:class:`PracticeConfig` is a frozen dataclass built once from the user's two
answers at the start of a session and read-only afterwards.  At least one of
its fields is always set: if the user leaves both blank,
:func:`build_practice_config` substitutes :meth:`PracticeConfig.default`.

Parsing is deliberately asymmetric:

* an unparseable question count falls back to
  :data:`FALLBACK_NUM_QUESTIONS`;
* an unparseable time limit disables the time limit.

Typical usage::

    config, defaulted = build_practice_config("10", "")
    assert config.num_questions == 10 and config.time_limit is None
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Optional, Tuple

#: Time limit forced when neither a count nor a limit is supplied.
DEFAULT_TIME_LIMIT_SECONDS: Final[float] = 600.0

#: Question count used when the count answer cannot be parsed.
FALLBACK_NUM_QUESTIONS: Final[int] = 5

#: Optional sign and ASCII digits only; ``int()`` alone would also take
#: ``"1_000"`` and non-ASCII digits.
_INTEGER_RE: Final[re.Pattern] = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class PracticeConfig:
    """Stopping policy for one session.

    Attributes:
        num_questions: Stop after this many questions.  ``None`` = unlimited.
        time_limit: Stop at the first between-question check where elapsed
            seconds ``>=`` this value.  ``None`` = no limit.

    Raises:
        ValueError: If both fields are ``None``; such a session never stops.
            Use :meth:`default` for the 10-minute policy.
    """

    num_questions: Optional[int] = None
    time_limit: Optional[float] = None

    def __post_init__(self) -> None:
        if self.num_questions is None and self.time_limit is None:
            raise ValueError(
                "PracticeConfig needs num_questions or time_limit; "
                "use PracticeConfig.default() for the 10-minute limit."
            )
        if self.time_limit is not None and self.time_limit < 0:
            raise ValueError(f"time_limit must be >= 0, got {self.time_limit!r}.")

    @classmethod
    def default(cls) -> "PracticeConfig":
        return cls(num_questions=None, time_limit=DEFAULT_TIME_LIMIT_SECONDS)

    @property
    def time_limit_minutes(self) -> Optional[int]:
        if self.time_limit is None:
            return None
        return int(self.time_limit // 60)


def parse_integer(text: str) -> int:
    """Parse a trimmed, signed decimal integer.

    Raises:
        ValueError: Unless ``text`` is an optional sign followed by ASCII digits.
    """
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def parse_num_questions(text: str) -> Optional[int]:
    text = text.strip()
    if not text:
        return None
    try:
        return parse_integer(text)
    except ValueError:
        return FALLBACK_NUM_QUESTIONS


def parse_time_limit(text: str) -> Optional[float]:
    """Whole minutes → seconds.  Blank, negative or non-integer → ``None``."""
    text = text.strip()
    if not text:
        return None
    try:
        minutes = parse_integer(text)
    except ValueError:
        return None
    if minutes < 0:
        return None
    return float(minutes * 60)


def build_practice_config(num_text: str, time_text: str) -> Tuple[PracticeConfig, bool]:
    """Build the session config from the two raw answers.

    Returns:
        ``(config, defaulted)`` where ``defaulted`` is True when both answers
        resolved to ``None`` and the 10-minute default was substituted.
    """
    num_questions = parse_num_questions(num_text)
    time_limit = parse_time_limit(time_text)
    if num_questions is None and time_limit is None:
        return PracticeConfig.default(), True
    return PracticeConfig(num_questions=num_questions, time_limit=time_limit), False

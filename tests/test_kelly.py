"""
Tests for Kelly fraction math, tolerance scoring and feedback bands.
Run with: pytest tests/test_kelly.py -v
"""

import pytest

from mathdrill.core.kelly import (
    KELLY_TOLERANCE,
    ODDS_MAX,
    ODDS_MIN,
    WIN_PROB_MAX,
    WIN_PROB_MIN,
    FeedbackBand,
    KellyQuestion,
    feedback_band,
    generate_kelly_question,
    is_within_tolerance,
    kelly_fraction,
)
from mathdrill.core.questions import make_rng


class TestKellyFraction:

    def test_even_money_sixty_percent(self):
        # b = 1.0, p = 0.6, q = 0.4 → (0.6 - 0.4) / 1.0 = 0.2
        assert kelly_fraction(0.6, 2.0) == pytest.approx(0.2)

    def test_three_to_one(self):
        # b = 2.0, p = 0.5 → (1.0 - 0.5) / 2.0 = 0.25
        assert kelly_fraction(0.5, 3.0) == pytest.approx(0.25)

    def test_negative_edge_floored(self):
        assert kelly_fraction(0.3, 2.0) == 0.0

    def test_break_even_is_zero(self):
        assert kelly_fraction(0.5, 2.0) == pytest.approx(0.0)

    @pytest.mark.parametrize("odds", [1.0, 0.5, -2.0])
    def test_rejects_odds_without_profit(self, odds):
        with pytest.raises(ValueError):
            kelly_fraction(0.5, odds)

    @pytest.mark.parametrize("prob", [-0.1, 1.1])
    def test_rejects_bad_probability(self, prob):
        with pytest.raises(ValueError):
            kelly_fraction(prob, 2.0)


class TestKellyGenerator:

    def test_draws_within_ranges_and_never_negative(self):
        rng = make_rng(99)
        for _ in range(2000):
            q = generate_kelly_question(rng)
            assert ODDS_MIN <= q.decimal_odds < ODDS_MAX
            assert WIN_PROB_MIN <= q.win_probability < WIN_PROB_MAX
            assert q.correct_fraction >= 0.0
            assert q.correct_fraction == pytest.approx(
                kelly_fraction(q.win_probability, q.decimal_odds)
            )

    def test_from_market(self):
        q = KellyQuestion.from_market(2.0, 0.6)
        assert q.decimal_odds == 2.0
        assert q.win_probability == 0.6
        assert q.correct_fraction == pytest.approx(0.2)


class TestTolerance:

    def test_default_tolerance(self):
        assert KELLY_TOLERANCE == 0.05

    @pytest.mark.parametrize("answer", [0.2, 0.22, 0.16, 0.245])
    def test_within(self, answer):
        assert is_within_tolerance(answer, 0.2)

    @pytest.mark.parametrize("answer", [0.26, 0.14, 0.5, -0.2])
    def test_outside(self, answer):
        assert not is_within_tolerance(answer, 0.2)


@pytest.mark.parametrize("diff, expected", [
    (0.0,   FeedbackBand.CLOSE),
    (0.06,  FeedbackBand.CLOSE),      # accuracy 0.70
    (0.08,  FeedbackBand.MODERATE),   # accuracy 0.60
    (0.12,  FeedbackBand.MODERATE),   # accuracy 0.40
    (0.14,  FeedbackBand.FAR),        # accuracy 0.30
    (0.20,  FeedbackBand.FAR),
    (0.90,  FeedbackBand.FAR),        # saturates
    (-0.08, FeedbackBand.MODERATE),   # sign does not matter
])
def test_feedback_band(diff, expected):
    assert feedback_band(diff) is expected

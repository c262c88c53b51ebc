"""
Total-points prediction for a table-tennis fixture.

Pure and stateless: two recent histories in, one Prediction out.
"""

import logging
import math
from fractions import Fraction

from tt_predictor.core.interfaces import BasePredictor
from tt_predictor.core.schema import MatchFixture, PlayerHistory, Prediction
from tt_predictor.engine.params import DEFAULT_PARAMS, EngineParams
from tt_predictor.engine.stats import as_fraction, player_stats, weighted_mean_exact

log = logging.getLogger(__name__)


def round_half_up(x: Fraction | float) -> int:
    """Round to nearest integer, .5 going up (68.5 → 69, 60.5 → 61)."""
    return int(math.floor(x + Fraction(1, 2)))


def clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def compute_prediction(
    history_a: PlayerHistory,
    history_b: PlayerHistory,
    params: EngineParams | None = None,
) -> Prediction:
    """Estimate the total points of A vs B from their last matches.

    1. Per player: sample std of recent totals and recency-weighted mean
    2. Expected total = average of the two weighted means
    3. Confidence = 1 - avg_dispersion / scale, clamped to [floor, ceiling]
    4. Interval = expected ± half_width, clamped to [interval_floor, interval_ceiling]
    5. Verdict from the rounded expected total
    """
    p = params or DEFAULT_PARAMS
    a = player_stats(history_a, p)
    b = player_stats(history_b, p)

    # kept exact until rounding
    expected = (weighted_mean_exact(history_a, p) + weighted_mean_exact(history_b, p)) / 2
    half_width = as_fraction(p.interval_half_width)

    avg_dispersion = (a.dispersion + b.dispersion) / 2.0
    confidence = clamp(
        1.0 - avg_dispersion / p.dispersion_scale,
        p.confidence_floor, p.confidence_ceiling,
    )

    low = round_half_up(clamp(
        expected - half_width, p.interval_floor, p.interval_ceiling,
    ))
    high = round_half_up(clamp(
        expected + half_width, p.interval_floor, p.interval_ceiling,
    ))

    total = round_half_up(expected)
    return Prediction(
        total_estimated=total,
        low=low,
        high=high,
        verdict=p.verdict.classify(total),
        confidence=confidence,
    )


def predict_fixture(fixture: MatchFixture, params: EngineParams | None = None) -> MatchFixture:
    """Return a copy of ``fixture`` with its prediction attached."""
    pred = compute_prediction(fixture.history_a, fixture.history_b, params)
    log.debug(
        f"{fixture.match_id}: total={pred.total_estimated} "
        f"[{pred.low}, {pred.high}] {pred.verdict.value} conf={pred.confidence:.2f}"
    )
    return fixture.with_prediction(pred)


class StatisticalPredictor(BasePredictor):
    """BasePredictor wrapper around compute_prediction with fixed params."""

    def __init__(self, params: EngineParams | None = None):
        self.params = params or DEFAULT_PARAMS

    def predict(self, history_a: PlayerHistory, history_b: PlayerHistory) -> Prediction:
        return compute_prediction(history_a, history_b, self.params)

    def predict_all(self, fixtures: list[MatchFixture]) -> list[MatchFixture]:
        """Attach a prediction to every fixture. Each is computed independently."""
        return [predict_fixture(f, self.params) for f in fixtures]

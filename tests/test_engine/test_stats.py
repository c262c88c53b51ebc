"""Tests for per-player statistics."""

import math
from fractions import Fraction

import pytest

from tt_predictor.core.schema import PlayedMatch, SetScore
from tt_predictor.engine.params import EngineParams
from tt_predictor.engine.stats import (
    as_fraction, player_stats, recency_weights, recent_totals, simple_stats,
    weighted_mean, weighted_mean_exact,
)


def _history(*totals: int) -> list[PlayedMatch]:
    return [PlayedMatch((SetScore(t // 2, t - t // 2),)) for t in totals]


class TestSimpleStats:
    def test_empty(self):
        assert simple_stats([]) == (0.0, 0.0)

    def test_single_match_has_zero_dispersion(self):
        mean, disp = simple_stats(_history(77))
        assert mean == 77.0
        assert disp == 0.0

    def test_sample_std_uses_bessel(self):
        mean, disp = simple_stats(_history(90, 50))
        assert mean == 70.0
        assert disp == pytest.approx(math.sqrt(800))

    def test_four_matches(self):
        mean, disp = simple_stats(_history(100, 50, 50, 50))
        assert mean == 62.5
        assert disp == pytest.approx(25.0)

    def test_window_ignores_older_matches(self):
        assert simple_stats(_history(*([70] * 10 + [200, 0]))) == (70.0, 0.0)


class TestWeightedMean:
    def test_empty_uses_fallback(self):
        assert weighted_mean([]) == 76.0

    def test_custom_fallback(self):
        assert weighted_mean([], EngineParams(fallback_mean=70.0)) == 70.0

    def test_recent_three_weighted(self):
        assert weighted_mean(_history(100, 50, 50, 50)) == pytest.approx(370 / 5.8)

    def test_fewer_than_three(self):
        # all matches carry the recent weight, so it reduces to a plain mean
        assert weighted_mean(_history(80, 60)) == pytest.approx(70.0)

    def test_full_window(self):
        totals = [80, 80, 80, 70, 70, 70, 70, 70, 70, 70]
        expected = (1.6 * 240 + 70 * 7) / (1.6 * 3 + 7)
        assert weighted_mean(_history(*totals)) == pytest.approx(expected)

    def test_window_cap(self):
        totals = [80, 75, 90, 70, 72, 68, 81, 77, 79, 74]
        assert weighted_mean(_history(*totals, 10, 10, 10)) == weighted_mean(_history(*totals))

    def test_exact_mean(self):
        assert weighted_mean_exact(_history(100, 50, 50, 50)) == Fraction(1850, 29)
        assert weighted_mean_exact(_history(120, 97, 116)) == 111
        assert weighted_mean_exact([]) == 76


class TestHelpers:
    def test_recent_totals_sums_all_sets(self):
        m = PlayedMatch((SetScore(11, 9), SetScore(11, 13)))
        assert recent_totals([m]).tolist() == [44.0]

    def test_recency_weights(self):
        r, b = Fraction(8, 5), Fraction(1)
        assert recency_weights(5) == [r, r, r, b, b]
        assert recency_weights(2) == [r, r]
        assert recency_weights(0) == []

    def test_as_fraction_uses_written_value(self):
        assert as_fraction(1.6) == Fraction(8, 5)
        assert as_fraction(76.0) == 76

    def test_player_stats(self):
        s = player_stats(_history(90, 50))
        assert s.mean == 70.0
        assert s.dispersion == pytest.approx(math.sqrt(800))
        assert s.weighted_mean == pytest.approx(70.0)
        assert s.n_matches == 2

    def test_player_stats_caps_count(self):
        assert player_stats(_history(*([75] * 14))).n_matches == 10

"""
Per-player statistics over the recent-match window.

Histories are ordered most recent first; only the first ``window`` matches
are read, everything after is ignored.
"""

from fractions import Fraction

import numpy as np

from tt_predictor.core.schema import PlayerHistory, PlayerStats
from tt_predictor.engine.params import DEFAULT_PARAMS, EngineParams


def recent_totals(history: PlayerHistory, window: int = 10) -> np.ndarray:
    """Match totals (both players' points, all sets) of the last ``window`` matches."""
    return np.array([m.total for m in history[:window]], dtype=np.float64)


def simple_stats(history: PlayerHistory, window: int = 10) -> tuple[float, float]:
    """Return (mean, dispersion) of recent match totals.

    Dispersion is the sample standard deviation (ddof=1), defined as 0.0
    when fewer than two matches are available.
    """
    totals = recent_totals(history, window)
    mean = float(totals.mean()) if totals.size else 0.0
    dispersion = float(totals.std(ddof=1)) if totals.size >= 2 else 0.0
    return mean, dispersion


def as_fraction(x: float | int) -> Fraction:
    """Exact rational of a config constant as written (1.6 → 8/5)."""
    # str() gives the shortest repr, so binary rounding of 1.6 is not carried over
    return Fraction(str(x))


def recency_weights(
    n: int,
    recent_count: int = 3,
    recent_weight: float = 1.6,
    base_weight: float = 1.0,
) -> list[Fraction]:
    """Exact weights for ``n`` matches, most recent first."""
    recent, base = as_fraction(recent_weight), as_fraction(base_weight)
    return [recent if i < recent_count else base for i in range(n)]


def weighted_mean_exact(history: PlayerHistory, params: EngineParams = DEFAULT_PARAMS) -> Fraction:
    """Recency-weighted mean of recent match totals, as an exact rational.

    Falls back to ``params.fallback_mean`` for an empty history. With fewer
    matches than the window only the weights of present matches count.
    Exact so that a mean landing on .5 rounds half up reliably.
    """
    totals = [m.total for m in history[:params.window]]
    if not totals:
        return as_fraction(params.fallback_mean)
    w = recency_weights(
        len(totals), params.recent_count, params.recent_weight, params.base_weight,
    )
    return sum(wi * t for wi, t in zip(w, totals)) / sum(w)


def weighted_mean(history: PlayerHistory, params: EngineParams = DEFAULT_PARAMS) -> float:
    return float(weighted_mean_exact(history, params))


def player_stats(history: PlayerHistory, params: EngineParams = DEFAULT_PARAMS) -> PlayerStats:
    mean, dispersion = simple_stats(history, params.window)
    return PlayerStats(
        mean=mean,
        dispersion=dispersion,
        weighted_mean=weighted_mean(history, params),
        n_matches=min(len(history), params.window),
    )

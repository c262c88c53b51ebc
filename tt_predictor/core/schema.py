"""
TT Predictor domain objects.

All payload sources normalize into these types. Every module in the project
depends on this file; this file depends on nothing else.

Validation rules are enforced at construction time via __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence


class InvalidInputError(ValueError):
    """Raised for malformed scores or fixtures."""


# ── Enums ──────────────────────────────────────────────────────────────

class Verdict(Enum):
    OVER = "Over 74.5"
    UNDER = "Under 74.5"
    AVOID = "Avoid / Live"


# ── Domain Objects ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class SetScore:
    """Final score of one set."""
    points_a: int
    points_b: int

    def __post_init__(self):
        for name in ("points_a", "points_b"):
            val = getattr(self, name)
            # bool is an int subclass; True/False are never valid points
            if isinstance(val, bool) or not isinstance(val, int):
                raise InvalidInputError(f"{name} must be an integer, got {val!r}")
            if val < 0:
                raise InvalidInputError(f"{name} must be >= 0, got {val}")

    @property
    def total(self) -> int:
        return self.points_a + self.points_b


@dataclass(frozen=True)
class PlayedMatch:
    """One completed match from a player's recent history."""
    sets: tuple[SetScore, ...] = ()

    def __post_init__(self):
        # accept any sequence, store as tuple so the match stays hashable
        object.__setattr__(self, "sets", tuple(self.sets))
        for s in self.sets:
            if not isinstance(s, SetScore):
                raise InvalidInputError(f"expected SetScore, got {type(s).__name__}")

    @property
    def total(self) -> int:
        return sum(s.total for s in self.sets)

    @property
    def n_sets(self) -> int:
        return len(self.sets)


# Most recent match first. Only the first 10 entries are used.
PlayerHistory = Sequence[PlayedMatch]


@dataclass(frozen=True)
class PlayerStats:
    """Per-player statistics over the recent window.

    ``mean`` is informational only; the estimate uses ``weighted_mean``
    and the confidence uses ``dispersion``.
    """
    mean: float
    dispersion: float
    weighted_mean: float
    n_matches: int


@dataclass(frozen=True)
class Prediction:
    """Engine output for one fixture. Value object, never mutated."""
    total_estimated: int
    low: int
    high: int
    verdict: Verdict
    confidence: float

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must be <= high ({self.high})")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence out of range: {self.confidence}")

    @property
    def confidence_pct(self) -> int:
        # half-up, same convention as the engine
        return int(self.confidence * 100 + 0.5)

    def to_dict(self) -> dict:
        return {
            "totalEstimated": self.total_estimated,
            "low": self.low,
            "high": self.high,
            "verdict": self.verdict.value,
            "confidence": self.confidence,
        }


@dataclass
class MatchFixture:
    """An upcoming match plus both players' recent histories."""
    match_id: str
    competition: str
    start_time: str
    player_a: str
    player_b: str
    history_a: list[PlayedMatch] = field(default_factory=list)
    history_b: list[PlayedMatch] = field(default_factory=list)
    prediction: Optional[Prediction] = None

    def __post_init__(self):
        if not self.match_id:
            raise InvalidInputError("match_id cannot be empty")
        if not self.player_a or not self.player_b:
            raise InvalidInputError("player names cannot be empty")

    @property
    def title(self) -> str:
        return f"{self.player_a} vs {self.player_b}"

    @property
    def has_prediction(self) -> bool:
        return self.prediction is not None

    def with_prediction(self, prediction: Prediction) -> "MatchFixture":
        """Return a copy with ``prediction`` attached."""
        return replace(self, prediction=prediction)

    def to_dict(self) -> dict:
        out = {
            "matchId": self.match_id,
            "competition": self.competition,
            "startTime": self.start_time,
            "playerA": self.player_a,
            "playerB": self.player_b,
            "last10": {
                "playerA": [_match_to_dict(m) for m in self.history_a],
                "playerB": [_match_to_dict(m) for m in self.history_b],
            },
        }
        if self.prediction is not None:
            out["prediction"] = self.prediction.to_dict()
        return out


@dataclass
class Payload:
    """Envelope returned by every payload source."""
    date: str
    matches: list[MatchFixture] = field(default_factory=list)

    @property
    def n_fixtures(self) -> int:
        return len(self.matches)


def _match_to_dict(m: PlayedMatch) -> dict:
    return {"sets": [[s.points_a, s.points_b] for s in m.sets]}

"""Verdict classification of the rounded point estimate against the 74.5 line."""

from dataclasses import dataclass

from tt_predictor.core.schema import Verdict


@dataclass(frozen=True)
class VerdictPolicy:
    """Thresholds on the rounded total.

    Totals strictly between ``under_at`` and ``over_at`` fall in the dead
    zone and are classified as AVOID.
    """
    over_at: int = 78
    under_at: int = 72

    def __post_init__(self):
        if self.under_at >= self.over_at:
            raise ValueError(
                f"under_at ({self.under_at}) must be < over_at ({self.over_at})"
            )

    def classify(self, total: int) -> Verdict:
        if total >= self.over_at:
            return Verdict.OVER
        if total <= self.under_at:
            return Verdict.UNDER
        return Verdict.AVOID

    @property
    def dead_zone(self) -> range:
        return range(self.under_at + 1, self.over_at)

"""
Post-load payload quality validation.

Runs integrity checks on parsed fixtures before they reach the engine.
None of these checks block prediction except duplicate ids; they flag
fixtures whose estimate rests on thin or truncated data.
"""

import logging
from collections import Counter

from tt_predictor.core.schema import MatchFixture

log = logging.getLogger(__name__)


class PayloadValidator:
    """Validates a list of MatchFixture objects for quality issues."""

    def __init__(self, window: int = 10):
        self.window = window

    def validate(self, fixtures: list[MatchFixture]) -> dict:
        """Run all checks. Returns summary dict + logs warnings."""
        issues = []
        stats = Counter()
        seen_ids = Counter(f.match_id for f in fixtures)

        for mid, n in seen_ids.items():
            if n > 1:
                issues.append(("error", f"{mid}: duplicate match id ({n} fixtures)"))

        for f in fixtures:
            stats["fixtures"] += 1
            for side, name, history in (
                ("A", f.player_a, f.history_a),
                ("B", f.player_b, f.history_b),
            ):
                stats["played_matches"] += len(history)

                if not history:
                    stats["empty_histories"] += 1
                    issues.append((
                        "warn",
                        f"{f.match_id}: player {side} ({name}) has no history, "
                        f"using fallback mean",
                    ))
                elif len(history) < 2:
                    issues.append((
                        "warn",
                        f"{f.match_id}: player {side} ({name}) has 1 match, "
                        f"dispersion treated as 0",
                    ))
                if len(history) > self.window:
                    stats["truncated_histories"] += 1
                    issues.append((
                        "warn",
                        f"{f.match_id}: player {side} ({name}) has {len(history)} "
                        f"matches, only the first {self.window} are used",
                    ))

                empty = sum(1 for m in history[:self.window] if m.n_sets == 0)
                if empty:
                    stats["matches_without_sets"] += empty
                    issues.append((
                        "warn",
                        f"{f.match_id}: player {side} ({name}) has {empty} "
                        f"match(es) with no sets (total 0)",
                    ))

        # Log issues
        errors = [msg for level, msg in issues if level == "error"]
        warns = [msg for level, msg in issues if level == "warn"]

        if errors:
            log.error(f"Payload validation: {len(errors)} errors")
            for e in errors[:10]:
                log.error(f"  {e}")
        if warns:
            log.warning(f"Payload validation: {len(warns)} warnings")
            for w in warns[:10]:
                log.warning(f"  {w}")

        return {
            "stats": dict(stats),
            "errors": errors,
            "warnings": warns,
            "is_clean": len(errors) == 0,
        }

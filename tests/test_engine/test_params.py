"""Tests for engine parameters and the verdict policy."""

import pytest

from tt_predictor.core.schema import Verdict
from tt_predictor.engine.params import DEFAULT_PARAMS, EngineParams
from tt_predictor.engine.verdict import VerdictPolicy


class TestVerdictPolicy:
    @pytest.mark.parametrize("total,verdict", [
        (78, Verdict.OVER),
        (95, Verdict.OVER),
        (77, Verdict.AVOID),
        (75, Verdict.AVOID),
        (73, Verdict.AVOID),
        (72, Verdict.UNDER),
        (40, Verdict.UNDER),
    ])
    def test_default_thresholds(self, total, verdict):
        assert VerdictPolicy().classify(total) == verdict

    def test_dead_zone(self):
        assert list(VerdictPolicy().dead_zone) == [73, 74, 75, 76, 77]

    def test_invalid_thresholds(self):
        with pytest.raises(ValueError, match="under_at"):
            VerdictPolicy(over_at=72, under_at=72)

    def test_labels(self):
        assert Verdict.OVER.value == "Over 74.5"
        assert Verdict.UNDER.value == "Under 74.5"
        assert Verdict.AVOID.value == "Avoid / Live"


class TestEngineParams:
    def test_defaults(self):
        p = EngineParams()
        assert p.window == 10
        assert p.recent_weight == 1.6
        assert p.fallback_mean == 76.0
        assert (p.confidence_floor, p.confidence_ceiling) == (0.4, 0.9)
        assert (p.interval_floor, p.interval_ceiling) == (60.0, 120.0)

    def test_from_dict_empty(self):
        assert EngineParams.from_dict(None) == DEFAULT_PARAMS
        assert EngineParams.from_dict({}) == DEFAULT_PARAMS

    def test_from_dict_overrides(self):
        p = EngineParams.from_dict({"window": 8, "verdict": {"over_at": 80}})
        assert p.window == 8
        assert p.verdict == VerdictPolicy(over_at=80, under_at=72)

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown engine config keys"):
            EngineParams.from_dict({"windw": 8})

    def test_from_dict_bad_verdict(self):
        with pytest.raises(ValueError, match="engine.verdict"):
            EngineParams.from_dict({"verdict": {"line": 74.5}})

    def test_invalid_window(self):
        with pytest.raises(ValueError, match="window"):
            EngineParams(window=0)

    def test_invalid_confidence_bounds(self):
        with pytest.raises(ValueError, match="confidence"):
            EngineParams(confidence_floor=0.9, confidence_ceiling=0.4)

    def test_invalid_interval_bounds(self):
        with pytest.raises(ValueError, match="interval"):
            EngineParams(interval_floor=130.0)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_PARAMS.window = 5

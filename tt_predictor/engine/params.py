"""
Engine constants, collected in one immutable parameter set.

Defaults reproduce the production formula. The YAML ``engine:`` section
can override any of them.
"""

from dataclasses import dataclass, field, fields

from tt_predictor.engine.verdict import VerdictPolicy


@dataclass(frozen=True)
class EngineParams:
    window: int = 10                    # matches considered per player
    recent_count: int = 3               # most recent matches that get recent_weight
    recent_weight: float = 1.6
    base_weight: float = 1.0
    fallback_mean: float = 76.0         # weighted mean for an empty history
    dispersion_scale: float = 20.0
    confidence_floor: float = 0.4
    confidence_ceiling: float = 0.9
    interval_half_width: float = 8.0
    interval_floor: float = 60.0
    interval_ceiling: float = 120.0
    verdict: VerdictPolicy = field(default_factory=VerdictPolicy)

    def __post_init__(self):
        if self.window < 1:
            raise ValueError(f"window must be >= 1, got {self.window}")
        if self.recent_count < 0:
            raise ValueError(f"recent_count must be >= 0, got {self.recent_count}")
        if self.recent_weight <= 0 or self.base_weight <= 0:
            raise ValueError("weights must be > 0")
        if self.dispersion_scale <= 0:
            raise ValueError(f"dispersion_scale must be > 0, got {self.dispersion_scale}")
        if not 0.0 <= self.confidence_floor <= self.confidence_ceiling <= 1.0:
            raise ValueError(
                f"confidence bounds invalid: "
                f"[{self.confidence_floor}, {self.confidence_ceiling}]"
            )
        if self.interval_floor > self.interval_ceiling:
            raise ValueError(
                f"interval bounds invalid: "
                f"[{self.interval_floor}, {self.interval_ceiling}]"
            )
        if self.interval_half_width < 0:
            raise ValueError("interval_half_width must be >= 0")

    @classmethod
    def from_dict(cls, cfg: dict | None) -> "EngineParams":
        """Build params from a config mapping. Missing keys keep defaults."""
        cfg = dict(cfg or {})
        known = {f.name for f in fields(cls)}
        unknown = set(cfg) - known
        if unknown:
            raise ValueError(f"Unknown engine config keys: {', '.join(sorted(unknown))}")

        verdict_cfg = cfg.pop("verdict", None)
        if verdict_cfg is not None:
            if not isinstance(verdict_cfg, dict):
                raise ValueError("engine.verdict must be a mapping")
            try:
                cfg["verdict"] = VerdictPolicy(**verdict_cfg)
            except TypeError as e:
                raise ValueError(f"Invalid engine.verdict config: {e}") from e
        return cls(**cfg)


DEFAULT_PARAMS = EngineParams()

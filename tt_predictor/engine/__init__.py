# Public engine API
from tt_predictor.engine.params import DEFAULT_PARAMS, EngineParams  # noqa: F401
from tt_predictor.engine.predictor import (  # noqa: F401
    StatisticalPredictor, compute_prediction, predict_fixture, round_half_up,
)
from tt_predictor.engine.stats import (  # noqa: F401
    player_stats, simple_stats, weighted_mean, weighted_mean_exact,
)
from tt_predictor.engine.verdict import VerdictPolicy  # noqa: F401

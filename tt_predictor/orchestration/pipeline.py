"""
Prediction pipeline runner.

This is the ONLY module that imports from all other modules.
It wires ingestion → validation → engine → report.
"""

import logging

import httpx

from tt_predictor.engine.predictor import StatisticalPredictor
from tt_predictor.ingestion.payload import make_loader
from tt_predictor.ingestion.validator import PayloadValidator
from tt_predictor.orchestration.config import engine_params, load_config
from tt_predictor.reporting.report import format_card, generate_report

log = logging.getLogger(__name__)


def run_predictions(
    config_path: str = "configs/default.yaml",
    api_url: str | None = None,
    output_dir: str | None = None,
    write_report: bool | None = None,
) -> dict:
    """Load fixtures → validate → predict → report."""
    cfg = load_config(config_path)
    src = cfg["source"]
    params = engine_params(cfg)

    # ── 1. Load payload ──
    log.info("Step 1: Loading payload")
    loader = make_loader(
        api_url if api_url is not None else src.get("api_url"),
        local_path=src.get("local_path"),
        timeout=float(src.get("timeout_seconds", 15)),
        strict=bool(src.get("strict", False)),
    )
    try:
        payload = loader.load()
    except httpx.HTTPError as e:
        log.error(f"Payload fetch failed: {e}")
        raise

    if not payload.matches:
        log.warning("Payload contains no fixtures")

    # ── 2. Validate ──
    log.info("Step 2: Validating fixtures")
    validation = PayloadValidator(window=params.window).validate(payload.matches)
    log.info(f"Validation: {validation['stats']}")

    # ── 3. Predict ──
    log.info(f"Step 3: Predicting {payload.n_fixtures} fixtures")
    fixtures = StatisticalPredictor(params).predict_all(payload.matches)
    for f in fixtures:
        log.info("\n" + format_card(f))

    result = {
        "date": payload.date,
        "fixtures": fixtures,
        "validation": validation,
        "report_path": None,
    }

    # ── 4. Report ──
    report_cfg = cfg.get("report", {})
    if write_report is None:
        write_report = report_cfg.get("enabled", True)
    if write_report:
        log.info("Step 4: Writing report")
        result["report_path"] = generate_report(
            fixtures,
            output_dir=output_dir or cfg["paths"].get("reports", "reports"),
            payload_date=payload.date,
            validation=validation,
            include_plots=report_cfg.get("include_plots", False),
        )

    return result

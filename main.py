#!/usr/bin/env python3
"""
TT Predictor CLI.

Usage:
    python main.py predict
    python main.py predict --api-url https://example.com/matches.json
    python main.py show --payload path/to/matches.json
"""

import sys
import logging
import argparse

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("tt_predictor")


def cmd_predict(args):
    from tt_predictor.orchestration.pipeline import run_predictions

    try:
        result = run_predictions(
            args.config,
            api_url=args.api_url,
            output_dir=args.output_dir,
            write_report=False if args.no_report else None,
        )
    except Exception as e:
        log.error(f"Error: {e}")
        sys.exit(1)

    n = len(result["fixtures"])
    if not result["validation"]["is_clean"]:
        log.warning(f"{n} fixtures predicted, payload has validation errors.")
    else:
        log.info(f"{n} fixtures predicted.")
    if result["report_path"]:
        log.info(f"Full report: {result['report_path']}")


def cmd_show(args):
    import yaml

    from tt_predictor.engine import StatisticalPredictor
    from tt_predictor.ingestion.payload import LocalPayloadLoader
    from tt_predictor.orchestration.config import engine_params, load_config
    from tt_predictor.reporting.report import format_cards

    try:
        cfg = load_config(args.config)
        params = engine_params(cfg)
        local_path = args.payload or cfg["source"].get("local_path")
        payload = LocalPayloadLoader(local_path, strict=cfg["source"].get("strict", False)).load()
    except (OSError, ValueError, yaml.YAMLError) as e:
        log.error(f"Error: {e}")
        sys.exit(1)

    fixtures = StatisticalPredictor(params).predict_all(payload.matches)
    print(format_cards(fixtures))


def main():
    p = argparse.ArgumentParser(description="TT Predictor CLI")
    p.add_argument("--config", default="configs/default.yaml")
    sub = p.add_subparsers(dest="command")

    pr = sub.add_parser("predict")
    pr.add_argument("--api-url", default=None, help="Empty string forces the local payload")
    pr.add_argument("--output-dir", default=None)
    pr.add_argument("--no-report", action="store_true")

    sh = sub.add_parser("show")
    sh.add_argument("--payload", default=None, help="Payload file (default: source.local_path, then bundled sample)")

    args = p.parse_args()
    if args.command == "predict":
        cmd_predict(args)
    elif args.command == "show":
        cmd_show(args)
    else:
        p.print_help()


if __name__ == "__main__":
    main()

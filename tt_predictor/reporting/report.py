"""
Rendering and export of fixture predictions.

Produces a text card per fixture plus JSON / CSV exports and an optional
interval plot.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from tt_predictor.core.schema import MatchFixture

log = logging.getLogger(__name__)

BAR_WIDTH = 20

FRAME_COLUMNS = [
    "match_id", "competition", "start_time", "player_a", "player_b",
    "total_estimated", "low", "high", "verdict", "confidence",
]


def confidence_bar(confidence: float, width: int = BAR_WIDTH) -> str:
    filled = int(confidence * width + 0.5)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def format_card(fixture: MatchFixture) -> str:
    """Multi-line text card for one fixture."""
    lines = [
        fixture.title,
        f"{fixture.competition} • {fixture.start_time}",
    ]
    p = fixture.prediction
    if p is None:
        lines.append("Prediction: not computed")
        return "\n".join(lines)

    lines += [
        f"Total estimated: {p.total_estimated} (interval {p.low} – {p.high})",
        f"Verdict: {p.verdict.value} • Confidence: {p.confidence_pct}%",
        confidence_bar(p.confidence),
    ]
    return "\n".join(lines)


def format_cards(fixtures: list[MatchFixture]) -> str:
    return "\n\n".join(format_card(f) for f in fixtures)


def predictions_frame(fixtures: list[MatchFixture]) -> pd.DataFrame:
    """One row per fixture. Prediction columns are NaN/None when absent."""
    rows = []
    for f in fixtures:
        p = f.prediction
        rows.append({
            "match_id": f.match_id,
            "competition": f.competition,
            "start_time": f.start_time,
            "player_a": f.player_a,
            "player_b": f.player_b,
            "total_estimated": p.total_estimated if p else None,
            "low": p.low if p else None,
            "high": p.high if p else None,
            "verdict": p.verdict.value if p else None,
            "confidence": p.confidence if p else None,
        })
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def generate_report(
    fixtures: list[MatchFixture],
    output_dir: str = "reports",
    payload_date: str = "",
    validation: dict | None = None,
    include_plots: bool = True,
) -> str:
    """Write JSON, CSV and text reports. Returns path to the JSON report."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    json_path = out / f"predictions_{timestamp}.json"
    report_data = {
        "date": payload_date,
        "generated_at": datetime.now().isoformat(),
        "matches": [f.to_dict() for f in fixtures],
    }
    if validation is not None:
        report_data["validation"] = validation
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(report_data, f, indent=2, ensure_ascii=False)

    csv_path = out / f"predictions_{timestamp}.csv"
    predictions_frame(fixtures).to_csv(csv_path, index=False)

    txt_path = out / f"predictions_{timestamp}.txt"
    with open(txt_path, "w", encoding="utf-8") as f:
        f.write(_format_text_report(fixtures, payload_date))

    if include_plots and fixtures:
        try:
            _generate_plots(fixtures, out, timestamp)
        except ImportError:
            log.warning("matplotlib not available, skipping plots")

    log.info(f"Report saved to {json_path}")
    return str(json_path)


def _format_text_report(fixtures: list[MatchFixture], payload_date: str) -> str:
    counts = predictions_frame(fixtures)["verdict"].value_counts()
    lines = [
        "=" * 60,
        f"TT PREDICTOR — Fixtures {payload_date}".rstrip(),
        "=" * 60,
        "",
        f"Fixtures: {len(fixtures)}",
    ]
    for verdict, n in counts.items():
        lines.append(f"  {verdict:<14} {n:>4}")
    lines += ["", "-" * 60, ""]
    lines.append(format_cards(fixtures))
    lines += ["", "=" * 60, ""]
    return "\n".join(lines)


def _generate_plots(fixtures: list[MatchFixture], output_dir: Path, timestamp: str):
    """Estimated total with its interval per fixture, against the 74.5 line."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    df = predictions_frame(fixtures).dropna(subset=["total_estimated"])
    if df.empty:
        return

    labels = [f"{a} vs {b}" for a, b in zip(df["player_a"], df["player_b"])]
    y = range(len(df))
    # estimate can fall outside its clamped interval
    fig, ax = plt.subplots(figsize=(10, max(3, 0.5 * len(df) + 1)))
    ax.hlines(list(y), df["low"].astype(float), df["high"].astype(float), color="C0", alpha=0.6)
    ax.plot(df["total_estimated"].astype(float), list(y), "o", color="C0")
    ax.axvline(74.5, color="k", linestyle="--", alpha=0.5, label="74.5 line")
    ax.set_yticks(list(y))
    ax.set_yticklabels(labels)
    ax.set_xlabel("Total points")
    ax.set_title("Estimated totals")
    ax.legend()
    ax.grid(True, alpha=0.3, axis="x")

    plt.tight_layout()
    plot_path = output_dir / f"predictions_{timestamp}.png"
    plt.savefig(plot_path, dpi=150)
    plt.close(fig)
    log.info(f"Plots saved to {plot_path}")

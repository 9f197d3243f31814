"""
Pipeline orchestration: load → filter → compare/trend/score → insights → report.

This is the only analytics module with I/O (file loading, report formatting).
All analytical logic is delegated to comparison, trend, scoring, insights.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Union

import numpy as np

from ryze.comparison import (
    compare_expected_vs_actual,
    distribution_percentages,
    expectation_to_reality_breakdown,
)
from ryze.config import RyzeConfig
from ryze.frame import qualifying_frame
from ryze.insights import generate_insights
from ryze.messages import accuracy_rating, score_description
from ryze.models import Thought
from ryze.scoring import improvement_summary, positivity_score
from ryze.trend import monthly_accuracy_trend

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data loading (CLI mode only)
# ---------------------------------------------------------------------------

def load_thoughts(filepath: Union[str, Path]) -> List[Thought]:
    """Load thought records from a JSON array file."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    return _to_thoughts(data)


def _to_thoughts(records: Iterable[Union[Thought, Dict]]) -> List[Thought]:
    if not isinstance(records, (list, tuple)):
        raise ValueError("Thought data must be a list of records")

    thoughts: List[Thought] = []
    for i, record in enumerate(records):
        if isinstance(record, Thought):
            thoughts.append(record)
            continue
        if not isinstance(record, dict):
            raise ValueError(f"Record {i} is not an object")
        try:
            thoughts.append(Thought.from_dict(record))
        except ValueError as e:
            raise ValueError(f"Record {i}: {e}") from e
    return thoughts


# ---------------------------------------------------------------------------
# Core analysis (PURE FUNCTION — NO FILE I/O)
# ---------------------------------------------------------------------------

def _analyze_thoughts(
    thoughts: List[Thought],
    cfg: RyzeConfig,
    rng: np.random.Generator | None,
) -> Dict:
    """
    Every analytic over one snapshot.

    The reducers are independent; each applies the qualifying filter itself.
    """
    qualifying = len(qualifying_frame(thoughts, cfg))
    score = positivity_score(thoughts, cfg)
    trend = monthly_accuracy_trend(thoughts, cfg)

    return {
        "total_thoughts": len(thoughts),
        "qualifying_thoughts": qualifying,
        "active_thoughts": sum(1 for t in thoughts if not t.is_resolved),
        "positivity_score": round(score, 2),
        "score_description": score_description(score, cfg) if qualifying else None,
        "improvement": improvement_summary(thoughts, cfg),
        "outcome_comparison": [c.to_dict() for c in compare_expected_vs_actual(thoughts, cfg)],
        "expectation_breakdown": [
            b.to_dict() for b in expectation_to_reality_breakdown(thoughts, cfg)
        ],
        "distribution": [d.to_dict() for d in distribution_percentages(thoughts, cfg)],
        "accuracy_trend": [
            {**m.to_dict(), "rating": accuracy_rating(m.accuracy_pct, cfg)}
            for m in trend
        ],
        "insights": [c.to_dict() for c in generate_insights(thoughts, rng, cfg)],
    }


# ---------------------------------------------------------------------------
# Public Entry Points
# ---------------------------------------------------------------------------

def analyze(
    filepath: Union[str, Path],
    cfg: RyzeConfig | None = None,
    rng: np.random.Generator | None = None,
) -> Dict:
    """
    CLI-compatible entry point.
    Reads a JSON thought file and runs analysis.
    """
    if cfg is None:
        cfg = RyzeConfig()

    thoughts = load_thoughts(filepath)
    logger.info("Analyzing %d thoughts from %s", len(thoughts), filepath)
    return _analyze_thoughts(thoughts, cfg, rng)


def analyze_data(
    records: Iterable[Union[Thought, Dict]],
    cfg: RyzeConfig | None = None,
    rng: np.random.Generator | None = None,
) -> Dict:
    """
    Backend / UI integration entry point.

    Accepts Thought objects or their dict records. An empty list is valid
    and yields the onboarding state.
    """
    if cfg is None:
        cfg = RyzeConfig()

    thoughts = _to_thoughts(list(records))
    return _analyze_thoughts(thoughts, cfg, rng)


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

def generate_report(result: Dict) -> str:
    """Format the analysis result as a human-readable text report."""
    imp = result["improvement"]
    description = result["score_description"] or "No resolved thoughts yet"

    lines = [
        "RYZE REFLECTION REPORT",
        "=" * 58,
        "",
        f"  Thoughts Recorded   : {result['total_thoughts']}",
        f"  Resolved & Complete : {result['qualifying_thoughts']}",
        f"  Still Active        : {result['active_thoughts']}",
        f"  Positivity Score    : {result['positivity_score']} ({description})",
        f"  Better/Same/Worse   : {imp['better']} / {imp['matched']} / {imp['worse']}",
        "",
        "  Expected vs Actual:",
    ]

    for row in result["outcome_comparison"]:
        label = row["type"].title()
        lines.append(
            f"    {label:8s} : expected {row['expected_count']:3d}"
            f"  |  actual {row['actual_count']:3d}"
        )

    if result["accuracy_trend"]:
        lines.append("")
        lines.append("  Fear Accuracy by Month:")
        for point in result["accuracy_trend"]:
            lines.append(
                f"    {point['month']:10s} : {point['accuracy_pct']:6.2f}%  ({point['rating']})"
            )

    lines.append("")
    lines.append("  Insights:")
    for card in result["insights"]:
        lines.append(f"    * {card['title']}")
        lines.append(f"      {card['description']}")

    lines.append("")
    lines.append("=" * 58)
    return "\n".join(lines)

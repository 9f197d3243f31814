"""
Positivity score: a single [0, 100] measure of whether reality outperformed
expectation on average.

    50  — outcomes matched expectations on average
    100 — every thought landed max_span steps better than feared
    0   — the symmetric opposite
"""

from typing import Dict, Iterable

import numpy as np

from ryze.config import RyzeConfig
from ryze.frame import qualifying_frame
from ryze.models import Thought


def positivity_score(
    thoughts: Iterable[Thought],
    cfg: RyzeConfig | None = None,
) -> float:
    """
    Normalized average ordinal improvement across qualifying thoughts.

    improvement       = actual_index - expected_index       (per thought)
    max_improvement   = n * max_span
    score             = neutral + (Σ improvement / max_improvement) * neutral
    clamped to [floor, ceiling]; 0.0 when no thought qualifies.
    """
    if cfg is None:
        cfg = RyzeConfig()
    s = cfg.score

    df = qualifying_frame(thoughts, cfg)
    if df.empty:
        return 0.0

    total_improvement = float(df["improvement"].sum())
    max_improvement = len(df) * s.max_span

    raw = s.neutral + total_improvement * s.neutral / max_improvement
    return float(np.clip(raw, s.floor, s.ceiling))


def improvement_summary(
    thoughts: Iterable[Thought],
    cfg: RyzeConfig | None = None,
) -> Dict[str, float]:
    """How many qualifying thoughts came out better, the same, or worse than expected."""
    df = qualifying_frame(thoughts, cfg)
    improvement = df["improvement"]

    return {
        "better": int((improvement > 0).sum()),
        "matched": int((improvement == 0).sum()),
        "worse": int((improvement < 0).sum()),
        "mean_improvement": round(float(improvement.mean()), 3) if len(df) else 0.0,
    }

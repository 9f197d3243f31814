"""
Fear-accuracy trend: monthly share of thoughts where reality was at least
as good as expected.

Buckets are calendar months of `created_at` in the reference calendar
(see CalendarParams). Ordering uses the month period itself; the label is
derived from it for display only.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List

from ryze.config import RyzeConfig
from ryze.frame import qualifying_frame
from ryze.models import Thought


@dataclass(frozen=True)
class MonthlyAccuracy:
    month_label: str
    month_start: datetime
    accuracy_pct: float

    def to_dict(self) -> Dict:
        return {
            "month": self.month_label,
            "month_start": self.month_start.date().isoformat(),
            "accuracy_pct": round(self.accuracy_pct, 2),
        }


def monthly_accuracy_trend(
    thoughts: Iterable[Thought],
    cfg: RyzeConfig | None = None,
) -> List[MonthlyAccuracy]:
    """
    Accuracy per month, chronologically ascending.

    accuracy_pct = (# thoughts with actual_index >= expected_index) / bucket size × 100

    Only months holding at least one qualifying thought are emitted.
    """
    if cfg is None:
        cfg = RyzeConfig()

    df = qualifying_frame(thoughts, cfg)
    if df.empty:
        return []

    df["month"] = df["created_at"].dt.to_period("M")
    df["accurate"] = df["actual_index"] >= df["expected_index"]

    grouped = df.groupby("month", sort=True)["accurate"]
    accuracy = grouped.sum() * 100.0 / grouped.size()

    return [
        MonthlyAccuracy(
            month_label=month.strftime(cfg.calendar.month_label_format),
            month_start=month.start_time.to_pydatetime(),
            accuracy_pct=float(pct),
        )
        for month, pct in accuracy.items()
    ]

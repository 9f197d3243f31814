"""
Centralized configuration for all thresholds, band edges, and calendar settings.

Every tunable constant lives here. Analytics functions take an optional
RyzeConfig and fall back to the defaults below.
"""

from dataclasses import dataclass, field
from typing import Tuple


def _check_edges(name: str, edges: Tuple[float, ...], labels: int) -> None:
    if len(edges) != labels - 1:
        raise ValueError(f"{name}: expected {labels - 1} edges, got {len(edges)}")
    if any(not 0.0 < e < 100.0 for e in edges):
        raise ValueError(f"{name}: edges must lie strictly inside (0, 100), got {edges}")
    if list(edges) != sorted(set(edges)):
        raise ValueError(f"{name}: edges must be strictly ascending, got {edges}")


# ---------------------------------------------------------------------------
# Positivity score
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoreParams:
    """
    Parameters for the positivity score.

    score = neutral + (total_improvement / (n * max_span)) * neutral
    clamped to [floor, ceiling]
    """

    neutral: float = 50.0
    max_span: int = 5          # worst → best
    floor: float = 0.0
    ceiling: float = 100.0

    def __post_init__(self):
        if self.max_span <= 0:
            raise ValueError(f"max_span must be positive, got {self.max_span}")
        if not self.floor <= self.neutral <= self.ceiling:
            raise ValueError("neutral score must lie between floor and ceiling")


# ---------------------------------------------------------------------------
# Insight rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InsightThresholds:
    """Percent thresholds for the rule-based insight cards."""

    positive_reality_pct: float = 70.0
    balanced_perspective_pct: float = 50.0
    catastrophic_min_thoughts: int = 5
    catastrophic_pct: float = 70.0

    def __post_init__(self):
        for name in ("positive_reality_pct", "balanced_perspective_pct", "catastrophic_pct"):
            value = getattr(self, name)
            if not 0.0 <= value <= 100.0:
                raise ValueError(f"{name} must be within [0, 100], got {value}")
        if self.balanced_perspective_pct > self.positive_reality_pct:
            raise ValueError("balanced_perspective_pct cannot exceed positive_reality_pct")


# ---------------------------------------------------------------------------
# Message bands
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoreBands:
    """Lower edges of the score bands [0,30) [30,50) [50,70) [70,90) [90,100]."""

    edges: Tuple[float, ...] = (30.0, 50.0, 70.0, 90.0)

    def __post_init__(self):
        _check_edges("ScoreBands", self.edges, 5)


@dataclass(frozen=True)
class AccuracyBands:
    """Lower edges of the accuracy bands [0,20) [20,40) [40,60) [60,80) [80,100]."""

    edges: Tuple[float, ...] = (20.0, 40.0, 60.0, 80.0)

    def __post_init__(self):
        _check_edges("AccuracyBands", self.edges, 5)


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CalendarParams:
    """
    Reference calendar used to bucket thoughts by month.

    Naive datetimes are read as wall-clock time in this calendar; aware
    datetimes are converted to `timezone` first.
    """

    timezone: str = "UTC"
    month_label_format: str = "%b %Y"


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NotificationParams:
    """Follow-up policy for thoughts whose deadline has passed."""

    follow_up_after_days: int = 2

    def __post_init__(self):
        if self.follow_up_after_days < 0:
            raise ValueError("follow_up_after_days cannot be negative")


# ---------------------------------------------------------------------------
# Top-level config aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RyzeConfig:
    """Complete engine configuration. Pass to any entry point to override defaults."""

    score: ScoreParams = field(default_factory=ScoreParams)
    insights: InsightThresholds = field(default_factory=InsightThresholds)
    score_bands: ScoreBands = field(default_factory=ScoreBands)
    accuracy_bands: AccuracyBands = field(default_factory=AccuracyBands)
    calendar: CalendarParams = field(default_factory=CalendarParams)
    notifications: NotificationParams = field(default_factory=NotificationParams)

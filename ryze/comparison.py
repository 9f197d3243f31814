"""
Outcome comparison: expected vs actual counts over the outcome spectrum.

Three reducers over the same qualifying frame, one per chart shape:
    compare_expected_vs_actual        — all six types, side-by-side counts
    expectation_to_reality_breakdown  — what actually happened per expectation
    distribution_percentages          — shares of the qualifying total

All functions are pure. Empty input gives zero counts or an empty list.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import pandas as pd

from ryze.config import RyzeConfig
from ryze.frame import qualifying_frame
from ryze.models import OutcomeType, Thought


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OutcomeComparison:
    type: OutcomeType
    expected_count: int
    actual_count: int

    def to_dict(self) -> Dict:
        return {
            "type": self.type.value,
            "expected_count": self.expected_count,
            "actual_count": self.actual_count,
        }


@dataclass(frozen=True)
class OutcomeCount:
    type: OutcomeType
    count: int

    def to_dict(self) -> Dict:
        return {"type": self.type.value, "count": self.count}


@dataclass(frozen=True)
class ExpectationBreakdown:
    """Actual outcomes of every qualifying thought that expected `expected_type`."""

    expected_type: OutcomeType
    actual_breakdown: List[OutcomeCount] = field(default_factory=list)
    total_count: int = 0

    def percentage(self, outcome_type: OutcomeType) -> float:
        """Share of this group whose actual outcome was `outcome_type`."""
        if self.total_count == 0:
            return 0.0
        for entry in self.actual_breakdown:
            if entry.type is outcome_type:
                return entry.count / self.total_count * 100.0
        return 0.0

    def to_dict(self) -> Dict:
        return {
            "expected_type": self.expected_type.value,
            "actual_breakdown": [c.to_dict() for c in self.actual_breakdown],
            "total_count": self.total_count,
        }


@dataclass(frozen=True)
class OutcomeDistribution:
    type: OutcomeType
    expected_count: int
    expected_pct: float
    actual_count: int
    actual_pct: float

    def to_dict(self) -> Dict:
        return {
            "type": self.type.value,
            "expected_count": self.expected_count,
            "expected_pct": round(self.expected_pct, 2),
            "actual_count": self.actual_count,
            "actual_pct": round(self.actual_pct, 2),
        }


# ---------------------------------------------------------------------------
# Counting helper
# ---------------------------------------------------------------------------

_ORDINAL_RANGE = range(len(OutcomeType))


def _counts_by_ordinal(column: pd.Series) -> pd.Series:
    """Counts for every ordinal 0..5, zeros included, in ordinal order."""
    return column.value_counts().reindex(_ORDINAL_RANGE, fill_value=0)


# ---------------------------------------------------------------------------
# Reducers
# ---------------------------------------------------------------------------

def compare_expected_vs_actual(
    thoughts: Iterable[Thought],
    cfg: RyzeConfig | None = None,
) -> List[OutcomeComparison]:
    """Expected and actual counts for each of the six types, always six entries."""
    df = qualifying_frame(thoughts, cfg)
    expected = _counts_by_ordinal(df["expected_index"])
    actual = _counts_by_ordinal(df["actual_index"])

    return [
        OutcomeComparison(
            type=outcome_type,
            expected_count=int(expected[outcome_type.ordinal]),
            actual_count=int(actual[outcome_type.ordinal]),
        )
        for outcome_type in OutcomeType.ordered()
    ]


def expectation_to_reality_breakdown(
    thoughts: Iterable[Thought],
    cfg: RyzeConfig | None = None,
) -> List[ExpectationBreakdown]:
    """
    Group qualifying thoughts by expected type and count the actual types.

    Sparse on both axes: expected types with no thoughts are skipped, and
    within a group only actual types with a non-zero count are listed.
    """
    df = qualifying_frame(thoughts, cfg)
    if df.empty:
        return []

    table = pd.crosstab(df["expected_index"], df["actual_index"]).sort_index()
    table = table.reindex(columns=sorted(table.columns))

    data: List[ExpectationBreakdown] = []
    for expected_index, row in table.iterrows():
        nonzero = row[row > 0]
        data.append(ExpectationBreakdown(
            expected_type=OutcomeType.from_ordinal(int(expected_index)),
            actual_breakdown=[
                OutcomeCount(type=OutcomeType.from_ordinal(int(i)), count=int(c))
                for i, c in nonzero.items()
            ],
            total_count=int(row.sum()),
        ))

    return data


def distribution_percentages(
    thoughts: Iterable[Thought],
    cfg: RyzeConfig | None = None,
) -> List[OutcomeDistribution]:
    """
    Expected and actual shares per type over the whole qualifying set.

    The denominator is the qualifying total, shared by every type. Types
    with neither an expected nor an actual occurrence are dropped.
    """
    df = qualifying_frame(thoughts, cfg)
    total = len(df)
    if total == 0:
        return []

    expected = _counts_by_ordinal(df["expected_index"])
    actual = _counts_by_ordinal(df["actual_index"])

    data: List[OutcomeDistribution] = []
    for outcome_type in OutcomeType.ordered():
        e = int(expected[outcome_type.ordinal])
        a = int(actual[outcome_type.ordinal])
        if e == 0 and a == 0:
            continue
        data.append(OutcomeDistribution(
            type=outcome_type,
            expected_count=e,
            expected_pct=e / total * 100.0,
            actual_count=a,
            actual_pct=a / total * 100.0,
        ))

    return data

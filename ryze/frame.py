"""
Qualifying-thought frame.

The one precondition shared by every analytic: a thought counts only when
it is resolved and carries both an expected and an actual outcome. This
module applies that filter once and lays the survivors out as a DataFrame
of ordinal indices, which the reducers consume. Unqualifying records are
dropped here, never raised on.
"""

from datetime import datetime
from typing import Iterable
from zoneinfo import ZoneInfo

import pandas as pd

from ryze.config import RyzeConfig
from ryze.models import Thought


FRAME_COLUMNS = (
    "id",
    "created_at",
    "expected_index",
    "actual_index",
    "improvement",
)

INDEX_COLUMNS = ["expected_index", "actual_index", "improvement"]


def to_reference_calendar(ts: datetime, tz: ZoneInfo) -> datetime:
    """Naive timestamps are already reference wall-clock time; aware ones are converted."""
    if ts.tzinfo is None:
        return ts
    return ts.astimezone(tz).replace(tzinfo=None)


def qualifying_frame(
    thoughts: Iterable[Thought],
    cfg: RyzeConfig | None = None,
) -> pd.DataFrame:
    """
    One row per qualifying thought.

    Columns:
        id              — thought UUID
        created_at      — naive datetime in the reference calendar
        expected_index  — ordinal of the expected outcome (0..5)
        actual_index    — ordinal of the actual outcome (0..5)
        improvement     — actual_index - expected_index (-5..+5)
    """
    if cfg is None:
        cfg = RyzeConfig()
    tz = ZoneInfo(cfg.calendar.timezone)

    rows = []
    for thought in thoughts:
        if not thought.is_qualifying:
            continue
        expected = thought.expected_type.ordinal
        actual = thought.actual_type.ordinal
        rows.append((
            thought.id,
            to_reference_calendar(thought.created_at, tz),
            expected,
            actual,
            actual - expected,
        ))

    df = pd.DataFrame(rows, columns=list(FRAME_COLUMNS))
    df["created_at"] = pd.to_datetime(df["created_at"])
    df[INDEX_COLUMNS] = df[INDEX_COLUMNS].astype("int64")
    return df

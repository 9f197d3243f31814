"""
Domain model: the outcome spectrum, outcomes, and thoughts.

OutcomeType carries the one canonical ordinal mapping (worst=0 ... best=5).
Every "better than / worse than" comparison in the engine goes through
OutcomeType.ordinal; nothing else is weighted.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

import pandas as pd


# ---------------------------------------------------------------------------
# Outcome spectrum
# ---------------------------------------------------------------------------

class OutcomeType(Enum):
    """Six-point ordered outcome spectrum. Declaration order is the ordinal."""

    WORST = "worst"
    WORSE = "worse"
    OKAY = "okay"
    GOOD = "good"
    BETTER = "better"
    BEST = "best"

    @classmethod
    def ordered(cls) -> List["OutcomeType"]:
        return list(cls)

    @classmethod
    def from_ordinal(cls, index: int) -> "OutcomeType":
        members = cls.ordered()
        if not 0 <= index < len(members):
            raise ValueError(f"Ordinal out of range: {index}")
        return members[index]

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @property
    def display_name(self) -> str:
        return self.value.title()

    @property
    def color_tag(self) -> str:
        return _COLOR_TAGS[self]


_ORDINALS: Dict[OutcomeType, int] = {t: i for i, t in enumerate(OutcomeType)}

_COLOR_TAGS: Dict[OutcomeType, str] = {
    OutcomeType.WORST: "red",
    OutcomeType.WORSE: "orange",
    OutcomeType.OKAY: "yellow",
    OutcomeType.GOOD: "green",
    OutcomeType.BETTER: "blue",
    OutcomeType.BEST: "purple",
}

# Widest possible gap between expectation and reality, in ordinal steps
MAX_SPAN = len(OutcomeType) - 1


def _parse_outcome_type(value) -> Optional[OutcomeType]:
    if value is None or isinstance(value, OutcomeType):
        return value
    try:
        return OutcomeType(value)
    except ValueError:
        raise ValueError(f"Unknown outcome type: {value!r}") from None


def _parse_datetime(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return pd.Timestamp(value).to_pydatetime()


def _parse_bool(value, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    return value


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------

@dataclass
class Outcome:
    """One described point on a thought's spectrum. Owned by its thought."""

    type: OutcomeType
    description: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": str(self.id),
            "type": self.type.value,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Outcome":
        if "type" not in data:
            raise ValueError("Outcome record is missing 'type'")
        return cls(
            type=_parse_outcome_type(data["type"]),
            description=data.get("description", ""),
            id=uuid.UUID(data["id"]) if data.get("id") else uuid.uuid4(),
        )


# ---------------------------------------------------------------------------
# Thought (aggregate root)
# ---------------------------------------------------------------------------

@dataclass
class Thought:
    """
    A worrying thought with its outcome spectrum and resolution state.

    Created active (unresolved) with an expected outcome, resolved exactly
    once with the actual outcome. Records loaded from outside may violate
    the invariants; such records are simply never qualifying.
    """

    question: str
    created_at: datetime = field(default_factory=datetime.now)
    outcomes: List[Outcome] = field(default_factory=list)
    expected_type: Optional[OutcomeType] = None
    deadline: Optional[datetime] = None
    actual_type: Optional[OutcomeType] = None
    is_resolved: bool = False
    resolution_date: Optional[datetime] = None
    last_notification_date: Optional[datetime] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    # -- Analytics precondition ------------------------------------------------

    @property
    def is_qualifying(self) -> bool:
        """Resolved, with both expected and actual outcome recorded."""
        return (
            self.is_resolved
            and self.expected_type is not None
            and self.actual_type is not None
        )

    # -- Lifecycle ---------------------------------------------------------------

    def resolve(self, actual_type: OutcomeType, when: Optional[datetime] = None) -> None:
        if self.is_resolved:
            raise ValueError(f"Thought {self.id} is already resolved")
        self.actual_type = actual_type
        self.is_resolved = True
        self.resolution_date = when or datetime.now()

    def reschedule(self, deadline: datetime) -> None:
        if self.is_resolved:
            raise ValueError(f"Cannot reschedule resolved thought {self.id}")
        self.deadline = deadline

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        if self.is_resolved or self.deadline is None:
            return False
        return (now or datetime.now()) > self.deadline

    def days_until_deadline(self, now: Optional[datetime] = None) -> Optional[int]:
        """Whole days until the deadline (negative once passed)."""
        if self.deadline is None:
            return None
        return (self.deadline - (now or datetime.now())).days

    def outcome_for(self, outcome_type: OutcomeType) -> Optional[Outcome]:
        for outcome in self.outcomes:
            if outcome.type is outcome_type:
                return outcome
        return None

    # -- Serialization -------------------------------------------------------------

    def to_dict(self) -> Dict:
        return {
            "id": str(self.id),
            "question": self.question,
            "created_at": _format_datetime(self.created_at),
            "outcomes": [o.to_dict() for o in self.outcomes],
            "expected_type": self.expected_type.value if self.expected_type else None,
            "deadline": _format_datetime(self.deadline),
            "actual_type": self.actual_type.value if self.actual_type else None,
            "is_resolved": self.is_resolved,
            "resolution_date": _format_datetime(self.resolution_date),
            "last_notification_date": _format_datetime(self.last_notification_date),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Thought":
        missing = {"question", "created_at"} - set(data)
        if missing:
            raise ValueError(f"Thought record is missing fields: {sorted(missing)}")

        return cls(
            id=uuid.UUID(data["id"]) if data.get("id") else uuid.uuid4(),
            question=data["question"],
            created_at=_parse_datetime(data["created_at"]),
            outcomes=[Outcome.from_dict(o) for o in data.get("outcomes") or []],
            expected_type=_parse_outcome_type(data.get("expected_type")),
            deadline=_parse_datetime(data.get("deadline")),
            actual_type=_parse_outcome_type(data.get("actual_type")),
            is_resolved=_parse_bool(data.get("is_resolved"), "is_resolved"),
            resolution_date=_parse_datetime(data.get("resolution_date")),
            last_notification_date=_parse_datetime(data.get("last_notification_date")),
        )

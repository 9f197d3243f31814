"""
Thought store: in-memory records persisted to a single JSON file.

Every mutation rewrites the file and notifies the injected Notifier so
deadline reminders follow the thought's lifecycle. Delivering those
reminders is the notifier's business; the store only decides when to ask.
"""

import copy
import json
import logging
import uuid
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple, Union

from ryze.config import RyzeConfig
from ryze.models import Outcome, OutcomeType, Thought

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Notification hook
# ---------------------------------------------------------------------------

class Notifier(Protocol):
    def schedule_deadline(self, thought: Thought) -> None: ...

    def cancel(self, thought: Thought) -> None: ...

    def schedule_follow_up(self, thought: Thought) -> None: ...


class LoggingNotifier:
    """Default notifier: records what would have been scheduled."""

    def schedule_deadline(self, thought: Thought) -> None:
        logger.info("Deadline reminder for thought %s at %s", thought.id, thought.deadline)

    def cancel(self, thought: Thought) -> None:
        logger.info("Cancelled reminders for thought %s", thought.id)

    def schedule_follow_up(self, thought: Thought) -> None:
        logger.info("Follow-up reminder for overdue thought %s", thought.id)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

def _deadline_key(thought: Thought) -> Tuple[bool, datetime]:
    # Undated thoughts sort after dated ones
    return (thought.deadline is None, thought.deadline or datetime.max)


class ThoughtStore:
    """JSON-file backed repository of thoughts."""

    def __init__(
        self,
        path: Union[str, Path],
        notifier: Optional[Notifier] = None,
        cfg: RyzeConfig | None = None,
    ) -> None:
        self.path = Path(path)
        self.notifier = notifier or LoggingNotifier()
        self.cfg = cfg or RyzeConfig()
        self._thoughts: Dict[uuid.UUID, Thought] = {}
        self._load()

    # -- Persistence -------------------------------------------------------------

    def _load(self) -> None:
        if not self.path.exists():
            logger.info("No thought file at %s, starting empty", self.path)
            return

        with open(self.path, "r") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Thought file must contain a JSON array: {self.path}")

        for record in data:
            thought = Thought.from_dict(record)
            self._thoughts[thought.id] = thought
        logger.info("Loaded %d thoughts from %s", len(self._thoughts), self.path)

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        records = [t.to_dict() for t in self._thoughts.values()]
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w") as f:
            json.dump(records, f, indent=2)
        tmp.replace(self.path)
        logger.debug("Saved %d thoughts to %s", len(records), self.path)

    def _notify(self, action: str, thought: Thought) -> bool:
        """Call the notifier; False when it raised."""
        try:
            getattr(self.notifier, action)(thought)
        except Exception:
            logger.warning("Notifier %s failed for thought %s", action, thought.id, exc_info=True)
            return False
        return True

    def _require(self, thought_id: uuid.UUID) -> Thought:
        try:
            return self._thoughts[thought_id]
        except KeyError:
            raise KeyError(f"Unknown thought: {thought_id}") from None

    # -- CRUD --------------------------------------------------------------------

    def create_thought(
        self,
        question: str,
        expected_type: Optional[OutcomeType],
        deadline: Optional[datetime] = None,
        outcome_descriptions: Optional[Dict[OutcomeType, str]] = None,
    ) -> Thought:
        """Author a new active thought. Blank outcome descriptions are skipped."""
        if not question or not question.strip():
            raise ValueError("Thought question cannot be blank")
        if expected_type is None:
            raise ValueError("An expected outcome must be selected")

        outcomes = [
            Outcome(type=t, description=d.strip())
            for t, d in (outcome_descriptions or {}).items()
            if d and d.strip()
        ]
        outcomes.sort(key=lambda o: o.type.ordinal)

        thought = Thought(
            question=question.strip(),
            outcomes=outcomes,
            expected_type=expected_type,
            deadline=deadline,
        )
        self.add(thought)
        return thought

    def add(self, thought: Thought) -> None:
        self._thoughts[thought.id] = thought
        self._save()
        logger.debug("Added thought %s", thought.id)
        if thought.deadline is not None and not thought.is_resolved:
            self._notify("schedule_deadline", thought)

    def get(self, thought_id: uuid.UUID) -> Optional[Thought]:
        return self._thoughts.get(thought_id)

    def update(self, thought: Thought) -> None:
        self._require(thought.id)
        self._thoughts[thought.id] = thought
        self._save()

    def delete(self, thought_id: uuid.UUID) -> None:
        thought = self._require(thought_id)
        self._notify("cancel", thought)
        del self._thoughts[thought_id]
        self._save()
        logger.debug("Deleted thought %s", thought_id)

    # -- Queries -----------------------------------------------------------------

    def all_thoughts(self) -> List[Thought]:
        """Newest first."""
        return sorted(self._thoughts.values(), key=lambda t: t.created_at, reverse=True)

    def active_thoughts(self) -> List[Thought]:
        """Unresolved, closest deadline first."""
        active = [t for t in self._thoughts.values() if not t.is_resolved]
        return sorted(active, key=_deadline_key)

    def resolved_thoughts(self) -> List[Thought]:
        """Resolved, latest deadline first."""
        resolved = [t for t in self._thoughts.values() if t.is_resolved]
        return sorted(
            resolved,
            key=lambda t: (t.deadline is not None, t.deadline or datetime.min),
            reverse=True,
        )

    def snapshot(self) -> Tuple[Thought, ...]:
        """Independent copies for analytics; later mutations don't leak in."""
        return tuple(copy.deepcopy(t) for t in self._thoughts.values())

    # -- Lifecycle ---------------------------------------------------------------

    def resolve(
        self,
        thought_id: uuid.UUID,
        actual_type: OutcomeType,
        when: Optional[datetime] = None,
    ) -> Thought:
        thought = self._require(thought_id)
        thought.resolve(actual_type, when)
        self._save()
        self._notify("cancel", thought)
        logger.debug("Resolved thought %s as %s", thought_id, actual_type.value)
        return thought

    def reschedule(self, thought_id: uuid.UUID, deadline: datetime) -> Thought:
        thought = self._require(thought_id)
        thought.reschedule(deadline)
        self._save()
        self._notify("schedule_deadline", thought)
        return thought

    def check_passed_deadlines(self, now: Optional[datetime] = None) -> List[Thought]:
        """
        Ask for a follow-up on thoughts left unresolved well past their deadline.

        A thought qualifies once its deadline is more than follow_up_after_days
        behind `now`, and at most once per that interval.
        """
        now = now or datetime.now()
        cutoff = now - timedelta(days=self.cfg.notifications.follow_up_after_days)

        notified: List[Thought] = []
        for thought in self.active_thoughts():
            if thought.deadline is None or thought.deadline >= cutoff:
                continue
            last = thought.last_notification_date
            if last is not None and last >= cutoff:
                continue
            if not self._notify("schedule_follow_up", thought):
                # Left unstamped so the next check retries
                continue
            thought.last_notification_date = now
            notified.append(thought)

        if notified:
            self._save()
            logger.info("Requested follow-ups for %d overdue thoughts", len(notified))
        return notified

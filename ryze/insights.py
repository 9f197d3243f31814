"""
Rule-based insight cards.

Inspects the qualifying set and emits a short ordered list of cards:

    1. Onboarding card when nothing qualifies (and nothing else)
    2. Exactly one of Positive Reality / Balanced Perspective / Realistic Concerns
    3. Catastrophic Thinking Pattern, when enough thoughts expected the worst
    4. One Growth Mindset card with a randomly chosen encouragement

The only non-determinism is the encouragement pick, drawn from an injected
numpy Generator.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List

import numpy as np

from ryze.config import RyzeConfig
from ryze.frame import qualifying_frame
from ryze.models import OutcomeType, Thought


@dataclass(frozen=True)
class InsightCard:
    title: str
    description: str
    icon_tag: str
    color_tag: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "icon": self.icon_tag,
            "color": self.color_tag,
        }


# ---------------------------------------------------------------------------
# Card text
# ---------------------------------------------------------------------------

BEGIN_JOURNEY = InsightCard(
    title="Begin Your Journey",
    description="Start tracking your thoughts to reveal patterns between expectations and reality.",
    icon_tag="sparkles",
    color_tag="blue",
)

BALANCED_PERSPECTIVE = InsightCard(
    title="Balanced Perspective",
    description=(
        "Reality has been better than you expected in about half of your recorded "
        "thoughts. You're developing a balanced outlook."
    ),
    icon_tag="scale.3d",
    color_tag="green",
)

REALISTIC_CONCERNS = InsightCard(
    title="Realistic Concerns",
    description=(
        "Many of your concerns have materialized as expected. While some fears are "
        "valid, continue to distinguish between helpful caution and limiting anxiety."
    ),
    icon_tag="eye",
    color_tag="purple",
)

POSITIVE_REALITY_TEXT = (
    "In {pct}% of your thoughts, reality turned out better than you expected. "
    "Your mind may be overestimating negative outcomes."
)

CATASTROPHIC_TEXT = (
    "You tend to expect the worst outcomes in {pct}% of situations. "
    "Consider challenging these thoughts when they arise."
)

ENCOURAGEMENTS = (
    "Your commitment to self-awareness is creating lasting change.",
    "Each thought you examine breaks the cycle of fear-based thinking.",
    "Notice how your perspective shifts as you continue this practice.",
    "You're building resilience with every thought you process.",
    "This journey of awareness is already changing how you see challenges.",
)

# Expectations that count as catastrophizing
CATASTROPHIC_TYPES = (OutcomeType.WORST, OutcomeType.WORSE)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

def _whole_pct(pct: float) -> int:
    # Half up: 72.5 reads as 73, not 72
    return int(pct + 0.5)


def _growth_mindset(rng: np.random.Generator) -> InsightCard:
    message = ENCOURAGEMENTS[int(rng.integers(len(ENCOURAGEMENTS)))]
    return InsightCard(
        title="Growth Mindset",
        description=message,
        icon_tag="leaf",
        color_tag="green",
    )


def generate_insights(
    thoughts: Iterable[Thought],
    rng: np.random.Generator | None = None,
    cfg: RyzeConfig | None = None,
) -> List[InsightCard]:
    """
    Evaluate the insight rules in order and return the resulting cards.

    "Better than expected" is strict (actual_index > expected_index); an
    exact match is not a pleasant surprise.
    """
    if cfg is None:
        cfg = RyzeConfig()
    if rng is None:
        rng = np.random.default_rng()
    it = cfg.insights

    df = qualifying_frame(thoughts, cfg)
    if df.empty:
        return [BEGIN_JOURNEY]

    cards: List[InsightCard] = []
    total = len(df)

    # Rule 2: how often reality beat the expectation
    better_count = int((df["actual_index"] > df["expected_index"]).sum())
    better_pct = better_count * 100.0 / total

    if better_pct >= it.positive_reality_pct:
        cards.append(InsightCard(
            title="Positive Reality",
            description=POSITIVE_REALITY_TEXT.format(pct=_whole_pct(better_pct)),
            icon_tag="sun.max",
            color_tag="orange",
        ))
    elif better_pct >= it.balanced_perspective_pct:
        cards.append(BALANCED_PERSPECTIVE)
    else:
        cards.append(REALISTIC_CONCERNS)

    # Rule 3: habitual worst-case expectations
    if total >= it.catastrophic_min_thoughts:
        worst_ordinals = [t.ordinal for t in CATASTROPHIC_TYPES]
        worst_count = int(df["expected_index"].isin(worst_ordinals).sum())
        worst_pct = worst_count * 100.0 / total

        if worst_pct >= it.catastrophic_pct:
            cards.append(InsightCard(
                title="Catastrophic Thinking Pattern",
                description=CATASTROPHIC_TEXT.format(pct=_whole_pct(worst_pct)),
                icon_tag="exclamationmark.triangle",
                color_tag="red",
            ))

    # Rule 4: always close with encouragement
    cards.append(_growth_mindset(rng))
    return cards

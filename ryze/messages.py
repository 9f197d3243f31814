"""
Message catalog: descriptive and reflective text for each chart, and
band lookups that turn scores and percentages into words and color tags.

Band lookups accept values in [0, 100] only. Scores and percentages come
from this engine already clamped, so anything else is a caller bug and
raises ValueError.
"""

import math
from enum import Enum
from typing import Dict, Sequence, Tuple

import numpy as np

from ryze.config import RyzeConfig


class ChartType(Enum):
    EXPECTATIONS_VS_REALITY = "Expectations vs. Reality"
    FEAR_ACCURACY_TREND = "Fear Accuracy Trend"
    OUTCOME_DISTRIBUTION = "Outcome Distribution"
    POSITIVITY_SCORE = "Positivity Score"


# ---------------------------------------------------------------------------
# Chart text
# ---------------------------------------------------------------------------

CHART_DESCRIPTIONS: Dict[ChartType, str] = {
    ChartType.EXPECTATIONS_VS_REALITY: (
        "This chart shows what actually happened when you expected each outcome, "
        "revealing how your predictions compare to reality."
    ),
    ChartType.FEAR_ACCURACY_TREND: (
        "This trend shows how accurately your expectations matched reality over time. "
        "Higher percentages mean reality was as good as or better than you expected."
    ),
    ChartType.OUTCOME_DISTRIBUTION: (
        "This visualization compares the distribution of your expected outcomes with "
        "what actually happened, showing where reality tends to land."
    ),
    ChartType.POSITIVITY_SCORE: (
        "Your positivity score measures the gap between your expectations and reality. "
        "A higher score means reality consistently exceeds your expectations."
    ),
}

REFLECTIONS: Dict[ChartType, Tuple[str, ...]] = {
    ChartType.EXPECTATIONS_VS_REALITY: (
        "When we compare our expectations to reality, we often find that our fears rarely "
        "materialize in the way we imagine. This awareness helps recalibrate our thinking.",
        "Your brain evolved to prepare for the worst as a survival mechanism. This chart "
        "helps you see the gap between ancient instincts and modern reality.",
        "Notice any patterns in how you predict outcomes versus what actually happens. "
        "This awareness builds your emotional intelligence over time.",
        "The distance between the bars represents the gap between fear and reality. Over "
        "time, you may notice this gap shrinking as your predictions become more accurate.",
    ),
    ChartType.FEAR_ACCURACY_TREND: (
        "As you continue to track your thoughts, notice how your prediction accuracy "
        "changes. Many people become more optimistic as they see evidence that outcomes "
        "are often better than feared.",
        "This trend line represents your growing ability to distinguish between helpful "
        "caution and limiting catastrophic thinking.",
        "Each point on this chart represents a moment of learning - a time when you "
        "challenged a fear-based thought and discovered what actually happened.",
        "Watch how your ability to predict outcomes improves over time. This growth "
        "reflects your developing emotional intelligence.",
    ),
    ChartType.OUTCOME_DISTRIBUTION: (
        "This distribution of outcomes shows you the true landscape of your experiences. "
        "Our minds tend to remember negative outcomes more strongly, but this chart shows "
        "the complete picture.",
        "Looking at this distribution helps counteract 'negativity bias' - our tendency to "
        "focus on and remember negative experiences more than positive ones.",
        "This chart represents the actual fabric of your experiences, not filtered through "
        "fear or anticipation.",
        "This visualization shows where your outcomes actually landed. Reality is often "
        "more balanced than our fears suggest.",
    ),
    ChartType.POSITIVITY_SCORE: (
        "Your positivity score isn't about toxic positivity or ignoring real concerns. "
        "It's about calibrating your expectations to match reality more accurately.",
        "Think of this score as your brain's operating system gradually receiving updates "
        "based on real-world data rather than ancient survival programming.",
        "As this score changes over time, it represents your growing ability to see "
        "situations clearly rather than through a lens of fear.",
        "This represents your brain's evolving relationship with uncertainty. Each thought "
        "you process helps calibrate your internal compass.",
    ),
}

DEFAULT_REFLECTION = (
    "By tracking your thoughts and outcomes, you're developing greater emotional "
    "resilience and a more balanced perspective."
)

# Short captions keyed by the chart identifiers the dashboard widgets use
CHART_CAPTIONS: Dict[str, Tuple[str, ...]] = {
    "stackedBar": (
        "Notice the gap between what you expected and what actually happened.",
        "Our minds often prepare us for worse outcomes than reality delivers.",
        "This chart shows the difference between fear and reality.",
        "With each data point, you're building a more accurate view of life.",
    ),
    "trendLine": (
        "Watch how your ability to predict outcomes improves over time.",
        "This growth reflects your developing emotional intelligence.",
        "Each data point represents a moment of learning and growth.",
        "Your brain is recalibrating expectations based on evidence.",
    ),
    "pieChart": (
        "This visualization shows where your outcomes actually landed.",
        "Reality is often more balanced than our fears suggest.",
        "Your experiences create a beautiful tapestry of possibilities.",
        "This pie chart represents the true distribution of your life experiences.",
    ),
    "positivityScore": (
        "This score captures your journey from fear toward reality.",
        "Each thought you process helps calibrate your internal compass.",
        "Watch this number grow as you continue your practice.",
        "This represents your brain's evolving relationship with uncertainty.",
    ),
}

DEFAULT_CAPTION = "Each data point represents a moment of awareness and growth."


# ---------------------------------------------------------------------------
# Band text (lowest band first)
# ---------------------------------------------------------------------------

SCORE_EXPLANATIONS = (
    "Your score suggests that outcomes have generally been worse than you expected. "
    "This may indicate a pattern of optimism or could reflect a truly challenging "
    "period. Remember that difficult times are temporary.",
    "Your score shows that reality has been slightly less positive than your "
    "expectations. This awareness can help you develop more calibrated predictions "
    "while maintaining hope.",
    "Your score indicates that your expectations generally match reality. This balance "
    "reflects a healthy and realistic outlook on life's uncertainties.",
    "Your score reveals that outcomes are frequently better than you predict. This "
    "pattern suggests you may tend toward catastrophic thinking that isn't matching "
    "your actual experiences.",
    "Your score shows a significant positive gap between expectations and reality. Your "
    "mind appears to consistently prepare for worse outcomes than what actually occurs.",
)

SCORE_DESCRIPTIONS = (
    "Worse than expected",
    "Slightly worse than expected",
    "Matches expectations",
    "Better than expected",
    "Much better than expected",
)

ACCURACY_RATINGS = ("Very Low", "Low", "Moderate", "Good", "Excellent")

# Shared by score and accuracy bands
BAND_COLORS = ("red", "orange", "yellow", "green", "blue")


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def _pick(pool: Sequence[str], rng: np.random.Generator | None) -> str:
    if rng is None:
        rng = np.random.default_rng()
    return pool[int(rng.integers(len(pool)))]


def band_index(value: float, edges: Sequence[float]) -> int:
    """
    Position of `value` among half-open bands [lo, hi); the last band is closed.

    edges are the inner lower bounds, e.g. (30, 50, 70, 90).
    """
    if value is None or math.isnan(value) or not 0.0 <= value <= 100.0:
        raise ValueError(f"Value must be within [0, 100], got {value}")
    return int(np.digitize(value, edges))


def chart_description(chart: ChartType) -> str:
    return CHART_DESCRIPTIONS[chart]


def reflection_message(chart: ChartType, rng: np.random.Generator | None = None) -> str:
    """One of the reflections written for `chart`, chosen at random."""
    return _pick(REFLECTIONS.get(chart, (DEFAULT_REFLECTION,)), rng)


def chart_caption(chart_key: str, rng: np.random.Generator | None = None) -> str:
    pool = CHART_CAPTIONS.get(chart_key)
    if not pool:
        return DEFAULT_CAPTION
    return _pick(pool, rng)


def score_explanation(score: float, cfg: RyzeConfig | None = None) -> str:
    cfg = cfg or RyzeConfig()
    return SCORE_EXPLANATIONS[band_index(score, cfg.score_bands.edges)]


def score_description(score: float, cfg: RyzeConfig | None = None) -> str:
    cfg = cfg or RyzeConfig()
    return SCORE_DESCRIPTIONS[band_index(score, cfg.score_bands.edges)]


def score_color_tag(score: float, cfg: RyzeConfig | None = None) -> str:
    cfg = cfg or RyzeConfig()
    return BAND_COLORS[band_index(score, cfg.score_bands.edges)]


def accuracy_rating(pct: float, cfg: RyzeConfig | None = None) -> str:
    cfg = cfg or RyzeConfig()
    return ACCURACY_RATINGS[band_index(pct, cfg.accuracy_bands.edges)]


def accuracy_color_tag(pct: float, cfg: RyzeConfig | None = None) -> str:
    cfg = cfg or RyzeConfig()
    return BAND_COLORS[band_index(pct, cfg.accuracy_bands.edges)]

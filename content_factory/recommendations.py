from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from content_factory.analyzer import MIN_GOOD_LENGTH
from schemas.description import Analysis


MAX_KEYWORD_DENSITY = 5.0

WELL_OPTIMIZED = "Great job! Your description is well-optimized"

SEO_TIPS = [
    "First 150 characters appear in search results - front-load keywords",
    "Include 2-3 relevant links to boost authority",
    "Use timestamps to improve watch time and SEO",
    "Add 3-5 relevant hashtags at the end",
    "Include a clear call-to-action for engagement",
]


@dataclass(frozen=True)
class _Rule:
    applies: Callable[[Analysis], bool]
    message: str


# Order matters: recommendations are emitted in this order.
_RULES = [
    _Rule(
        lambda a: a.total_length < MIN_GOOD_LENGTH,
        "Add more content - descriptions under 200 characters may hurt SEO",
    ),
    _Rule(
        lambda a: len(a.keywords_found) < 3,
        "Include more relevant keywords naturally throughout the description",
    ),
    _Rule(
        lambda a: not a.has_timestamps,
        "Add timestamps to improve user experience and SEO",
    ),
    _Rule(
        lambda a: not a.has_call_to_action,
        "Include a clear call-to-action (subscribe, like, comment)",
    ),
    _Rule(
        lambda a: not a.has_hashtags,
        "Add 3-5 relevant hashtags at the end",
    ),
    _Rule(
        lambda a: a.keyword_density > MAX_KEYWORD_DENSITY,
        "Reduce keyword density - current level may appear spammy",
    ),
]


def generate_recommendations(analysis: Analysis) -> list[str]:
    recommendations = [rule.message for rule in _RULES if rule.applies(analysis)]
    return recommendations or [WELL_OPTIMIZED]


def seo_tips() -> list[str]:
    return list(SEO_TIPS)

"""Description analyzer.

Deterministic: the analysis is a pure function of the document text and the
keyword list.

Scoring (0-100):
- Base 40.
- Length: +15 for 200-5000 characters, +10 above 5000.
- Keywords: +15 for three or more distinct hits, +10 for at least one.
- Structure: +10 timestamps, +10 call-to-action, +5 hashtags, +5 links.
"""

from __future__ import annotations

import re
from typing import Sequence

from lib.keywords import OrderedSet
from schemas.description import Analysis, KeywordHit, Rating


BASE_SCORE = 40
MIN_GOOD_LENGTH = 200
MAX_GOOD_LENGTH = 5000


def count_keyword(document: str, keyword: str) -> int:
    """Case-insensitive count of non-overlapping literal occurrences."""
    if not keyword:
        return 0
    return len(re.findall(re.escape(keyword), document, flags=re.IGNORECASE))


def find_keywords(document: str, keywords: Sequence[str]) -> list[KeywordHit]:
    """One hit per distinct keyword (case-insensitive) that occurs in the document."""
    hits: list[KeywordHit] = []
    for kw in OrderedSet(keywords, key=str.lower):
        count = count_keyword(document, kw)
        if count:
            hits.append(KeywordHit(keyword=kw, count=count))
    return hits


def keyword_density(hits: Sequence[KeywordHit], word_count: int) -> float:
    if word_count <= 0:
        return 0.0
    total = sum(h.count for h in hits)
    return round(total / word_count * 100, 2)


def score_description(
    *,
    total_length: int,
    keywords_found: int,
    has_timestamps: bool,
    has_call_to_action: bool,
    has_hashtags: bool,
    has_links: bool,
) -> int:
    score = BASE_SCORE

    if MIN_GOOD_LENGTH <= total_length <= MAX_GOOD_LENGTH:
        score += 15
    elif total_length > MAX_GOOD_LENGTH:
        score += 10

    if keywords_found >= 3:
        score += 15
    elif keywords_found >= 1:
        score += 10

    if has_timestamps:
        score += 10
    if has_call_to_action:
        score += 10
    if has_hashtags:
        score += 5
    if has_links:
        score += 5

    return min(100, score)


def rate_score(score: int) -> Rating:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "fair"
    return "needs improvement"


def analyze_description(document: str, keywords: Sequence[str]) -> Analysis:
    word_count = len(document.split())
    hits = find_keywords(document, keywords)

    has_timestamps = "TIMESTAMPS" in document
    has_call_to_action = "SUBSCRIBE" in document or "LIKE" in document
    has_hashtags = "#" in document
    has_links = "http" in document or "LINKS" in document

    score = score_description(
        total_length=len(document),
        keywords_found=len(hits),
        has_timestamps=has_timestamps,
        has_call_to_action=has_call_to_action,
        has_hashtags=has_hashtags,
        has_links=has_links,
    )

    return Analysis(
        total_length=len(document),
        word_count=word_count,
        line_count=len(document.split("\n")),
        keywords_found=hits,
        keyword_density=keyword_density(hits, word_count),
        has_timestamps=has_timestamps,
        has_call_to_action=has_call_to_action,
        has_hashtags=has_hashtags,
        has_links=has_links,
        seo_score=score,
        rating=rate_score(score),
    )

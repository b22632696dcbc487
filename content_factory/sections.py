"""Section generators for YouTube descriptions.

Every generator is a pure function of its arguments and returns one text
block. Style-dependent text comes from styles.content_style; an unknown style
falls back independently inside each generator via the fallback profile.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Sequence

from lib.keywords import OrderedSet
from schemas.description import Timestamp
from styles.content_style import ContentStyle, get_style_profile


RULE = "-" * 40

PLACEHOLDER_NOTE = "(Update with actual timestamps after editing)"

MAX_SEO_KEYWORDS = 8
MAX_HASHTAG_KEYWORDS = 5
MAX_HASHTAGS = 8
MAX_HASHTAG_LENGTH = 30
DEFAULT_HASHTAGS = ("#youtube", "#tutorial")

SOCIAL_PLATFORM_LABELS: dict[str, str] = {
    "twitter": "Twitter",
    "instagram": "Instagram",
    "tiktok": "TikTok",
    "discord": "Discord",
    "website": "Website",
    "github": "GitHub",
    "linkedin": "LinkedIn",
    "facebook": "Facebook",
}

_OVERVIEW_BULLETS = (
    "* The fundamentals of {concept}",
    "* Practical tips you can apply immediately",
    "* Common mistakes to avoid",
    "* Pro tips from real experience",
)


def generate_hook(title: str, concept: str, content_style: str | ContentStyle) -> str:
    """Title, blank line, then the style's opening line (the part search results show)."""
    hook_text = get_style_profile(content_style)["hook_template"].format(concept=concept)
    return f"{title}\n\n{hook_text}"


def generate_overview(concept: str, content_style: str | ContentStyle, target_audience: str) -> str:
    audience_text = f"Perfect for {target_audience}, this " if target_audience != "general" else "This "
    noun = get_style_profile(content_style)["overview_noun"]

    lines = [f"{audience_text}{noun} covers:"]
    lines.extend(b.format(concept=concept) for b in _OVERVIEW_BULLETS)
    return "\n".join(lines)


def generate_key_points(content_style: str | ContentStyle) -> str:
    points = get_style_profile(content_style)["key_points"]
    return "WHAT YOU'LL LEARN:\n" + "\n".join(f"* {p}" for p in points)


def format_timestamps(timestamps: Sequence[Timestamp]) -> str:
    formatted = "\n".join(f"{ts.time} - {ts.label}" for ts in timestamps)
    return f"TIMESTAMPS:\n{formatted}"


def generate_placeholder_timestamps(content_style: str | ContentStyle) -> str:
    placeholders = get_style_profile(content_style)["placeholder_timestamps"]
    return "TIMESTAMPS:\n" + "\n".join(placeholders) + f"\n\n{PLACEHOLDER_NOTE}"


def generate_call_to_action() -> str:
    return "\n".join([
        RULE,
        "",
        "LIKE this video if you found it helpful!",
        "SUBSCRIBE and hit the notification bell for more content!",
        "COMMENT below with your questions or thoughts!",
        "SHARE with someone who might benefit!",
        "",
        RULE,
    ])


def format_links(links: Iterable[str]) -> str:
    return "RESOURCES & LINKS:\n" + "\n".join(links)


def format_social_links(social_links: Mapping[str, str]) -> str:
    lines = [
        f"{SOCIAL_PLATFORM_LABELS.get(platform, platform)}: {url}"
        for platform, url in social_links.items()
    ]
    return "CONNECT WITH ME:\n" + "\n".join(lines)


def generate_seo_paragraph(concept: str, keywords: Sequence[str]) -> str:
    unique_keywords = OrderedSet(keywords).to_list()[:MAX_SEO_KEYWORDS]
    keyword_text = ", ".join(unique_keywords)

    return (
        f"{RULE}\n\n"
        f"This video about {concept} covers topics including: {keyword_text}. "
        "Whether you're just getting started or looking to improve your skills, "
        "this content will help you achieve your goals."
    )


def to_hashtag(text: str) -> str:
    return "#" + re.sub(r"\s+", "", text).lower()


def _hashtag_identity(tag: str) -> str:
    # Punctuation (including the leading '#') never distinguishes two tags.
    return re.sub(r"[\W_]+", "", tag.lower())


def generate_hashtags(concept: str, keywords: Sequence[str]) -> list[str]:
    """Concept tag, up to five keyword tags, then the default tags; first eight kept."""
    tags: OrderedSet[str] = OrderedSet(key=_hashtag_identity)

    def _add(tag: str) -> None:
        if len(tag) <= MAX_HASHTAG_LENGTH and _hashtag_identity(tag):
            tags.add(tag)

    _add(to_hashtag(concept))
    for kw in list(keywords)[:MAX_HASHTAG_KEYWORDS]:
        _add(to_hashtag(kw))
    for tag in DEFAULT_HASHTAGS:
        _add(tag)

    return tags.to_list()[:MAX_HASHTAGS]

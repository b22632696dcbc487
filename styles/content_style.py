from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, TypedDict


class ContentStyle(str, Enum):
    tutorial = "tutorial"
    review = "review"
    vlog = "vlog"
    entertainment = "entertainment"
    educational = "educational"


class StyleProfile(TypedDict):
    name: str

    # Second paragraph of the hook; "{concept}" is interpolated verbatim.
    hook_template: str

    # "This <noun> covers:" in the overview.
    overview_noun: str

    key_points: List[str]
    placeholder_timestamps: List[str]


_TUTORIAL_KEY_POINTS = [
    "Complete setup and configuration",
    "Step-by-step walkthrough",
    "Best practices and tips",
    "Troubleshooting common issues",
    "Advanced techniques",
]

_TUTORIAL_TIMESTAMPS = [
    "0:00 - Introduction",
    "1:30 - Getting Started",
    "5:00 - Main Tutorial",
    "12:00 - Tips & Tricks",
    "15:00 - Conclusion",
]


def resolve_content_style(value: str | ContentStyle | None) -> Optional[ContentStyle]:
    """Map a raw style string onto ContentStyle by exact value. Unknown values resolve to None."""
    if isinstance(value, ContentStyle):
        return value
    try:
        return ContentStyle(value or "")
    except ValueError:
        return None


def _base_profile(name: str) -> StyleProfile:
    return {
        "name": name,
        "hook_template": (
            "In this comprehensive {concept} tutorial, you'll learn everything you need to get started "
            "and master the fundamentals."
        ),
        "overview_noun": "step-by-step guide",
        "key_points": list(_TUTORIAL_KEY_POINTS),
        "placeholder_timestamps": list(_TUTORIAL_TIMESTAMPS),
    }


def _profiles() -> Dict[ContentStyle, StyleProfile]:
    profiles: Dict[ContentStyle, StyleProfile] = {}

    profiles[ContentStyle.tutorial] = _base_profile("Tutorial")

    r = _base_profile("Review")
    r.update({
        "hook_template": (
            "Is {concept} worth your time and money? In this honest review, I share my real experience "
            "and help you decide."
        ),
        "overview_noun": "in-depth review",
        "key_points": [
            "Pros and cons breakdown",
            "Real-world performance",
            "Value for money analysis",
            "Comparison with alternatives",
            "Final verdict",
        ],
        "placeholder_timestamps": [
            "0:00 - Introduction",
            "1:00 - Unboxing/Overview",
            "3:00 - Features",
            "7:00 - Performance",
            "10:00 - Final Verdict",
        ],
    })
    profiles[ContentStyle.review] = r

    # vlog and entertainment only have their own hook and noun; lists stay tutorial.
    v = _base_profile("Vlog")
    v.update({
        "hook_template": "Join me as I explore {concept} and share my journey with you. This is going to be exciting!",
        "overview_noun": "personal vlog",
    })
    profiles[ContentStyle.vlog] = v

    e = _base_profile("Entertainment")
    e.update({
        "hook_template": "Get ready for an amazing {concept} experience! You won't want to miss what happens next.",
        "overview_noun": "video",
    })
    profiles[ContentStyle.entertainment] = e

    ed = _base_profile("Educational")
    ed.update({
        "hook_template": (
            "Want to understand {concept}? This video breaks down everything in simple terms anyone can follow."
        ),
        "overview_noun": "educational breakdown",
        "key_points": [
            "Core concepts explained",
            "Real-world examples",
            "Key takeaways",
            "Further learning resources",
            "Practice exercises",
        ],
        "placeholder_timestamps": [
            "0:00 - Introduction",
            "2:00 - Core Concepts",
            "8:00 - Examples",
            "12:00 - Summary",
            "14:00 - Next Steps",
        ],
    })
    profiles[ContentStyle.educational] = ed

    return profiles


def _fallback_profile() -> StyleProfile:
    # Unknown styles: tutorial text everywhere except the overview noun.
    p = _base_profile("Fallback")
    p["overview_noun"] = "video"
    return p


def get_style_profile(style: str | ContentStyle | None) -> StyleProfile:
    resolved = resolve_content_style(style)
    if resolved is None:
        return _fallback_profile()
    return _profiles()[resolved]

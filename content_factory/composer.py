from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from content_factory.sections import (
    format_links,
    format_social_links,
    format_timestamps,
    generate_call_to_action,
    generate_hashtags,
    generate_hook,
    generate_key_points,
    generate_overview,
    generate_placeholder_timestamps,
    generate_seo_paragraph,
)
from schemas.description import DescriptionRequest, DescriptionSections


SECTION_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class _SectionSpec:
    name: str
    build: Callable[[], Optional[str]]


@dataclass(frozen=True)
class ComposedDescription:
    document: str
    sections: DescriptionSections
    hashtags: list[str]


def _section_specs(request: DescriptionRequest, keywords: Sequence[str]) -> list[_SectionSpec]:
    """Return the ordered section producers.

    Keep this order stable: it is the order sections appear in the description.
    A producer returning None omits its section.
    """
    style = request.content_style

    def timestamps() -> str:
        if request.timestamps:
            return format_timestamps(request.timestamps)
        return generate_placeholder_timestamps(style)

    def links() -> Optional[str]:
        return format_links(request.links) if request.links else None

    def social_links() -> Optional[str]:
        return format_social_links(request.social_links) if request.social_links else None

    return [
        _SectionSpec("hook", lambda: generate_hook(request.title, request.concept, style)),
        _SectionSpec("overview", lambda: generate_overview(request.concept, style, request.target_audience)),
        _SectionSpec("key_points", lambda: generate_key_points(style)),
        _SectionSpec("timestamps", timestamps),
        _SectionSpec("call_to_action", generate_call_to_action),
        _SectionSpec("links", links),
        _SectionSpec("social_links", social_links),
        _SectionSpec("seo_keywords", lambda: generate_seo_paragraph(request.concept, keywords)),
    ]


def compose_description(request: DescriptionRequest, keywords: Sequence[str]) -> ComposedDescription:
    """Build every section once, then join the present ones into the description."""
    built: list[tuple[str, str]] = []
    for spec in _section_specs(request, keywords):
        text = spec.build()
        if text is not None:
            built.append((spec.name, text))

    hashtags = generate_hashtags(request.concept, keywords)

    parts = [text for _, text in built]
    if request.include_hashtags:
        parts.append("\n" + " ".join(hashtags))

    return ComposedDescription(
        document=SECTION_SEPARATOR.join(parts),
        sections=DescriptionSections(**dict(built)),
        hashtags=hashtags,
    )

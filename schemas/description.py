from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from schemas.base import SchemaBase
from schemas.common import KeywordSet


Rating = Literal["excellent", "good", "fair", "needs improvement"]


class Timestamp(SchemaBase):
    time: str = Field(..., description="Position in the video, e.g. 1:30")
    label: str = Field(..., description="Chapter label")


class DescriptionRequest(SchemaBase):
    """
    Input for DescriptionWriterAgent.

    Notes:
    - title and concept are required; everything else has a default.
    - Malformed optional fields are coerced back to their defaults instead of failing.
    - content_style accepts any string; unknown styles fall back per section.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="The video title")
    concept: str = Field(..., description="The video concept/topic")
    keywords: Optional[KeywordSet] = Field(None, description="Keywords data from analyzer")
    content_style: str = Field("tutorial", description="Style of content")
    target_audience: str = Field("general", description="Target audience")
    timestamps: list[Timestamp] = Field(default_factory=list, description="Video timestamps")
    links: list[str] = Field(default_factory=list, description="Related links to include")
    social_links: dict[str, str] = Field(default_factory=dict, description="Social media links")
    include_hashtags: bool = Field(True, description="Append the hashtag line to the description")

    @field_validator("title", "concept")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("keywords", mode="before")
    @classmethod
    def _keywords_or_none(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, KeywordSet)) else None

    @field_validator("content_style", mode="before")
    @classmethod
    def _style_or_default(cls, v: Any) -> str:
        return v if isinstance(v, str) else "tutorial"

    @field_validator("target_audience", mode="before")
    @classmethod
    def _audience_or_default(cls, v: Any) -> str:
        if isinstance(v, str) and v.strip():
            return v
        return "general"

    @field_validator("timestamps", mode="before")
    @classmethod
    def _timestamps_or_empty(cls, v: Any) -> list[Any]:
        if not isinstance(v, list):
            return []
        out: list[Any] = []
        for entry in v:
            if isinstance(entry, Timestamp):
                out.append(entry)
                continue
            if not isinstance(entry, dict):
                continue
            time = entry.get("time")
            label = entry.get("label")
            time_s = "" if time is None else str(time)
            label_s = "" if label is None else str(label)
            if not time_s.strip() and not label_s.strip():
                continue
            out.append({"time": time_s, "label": label_s})
        return out

    @field_validator("links", mode="before")
    @classmethod
    def _links_or_empty(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [link for link in v if isinstance(link, str) and link.strip()]

    @field_validator("social_links", mode="before")
    @classmethod
    def _socials_or_empty(cls, v: Any) -> dict[str, str]:
        if not isinstance(v, dict):
            return {}
        return {
            str(platform): str(url)
            for platform, url in v.items()
            if url is not None and str(url).strip()
        }

    @field_validator("include_hashtags", mode="before")
    @classmethod
    def _bool_or_default(cls, v: Any) -> bool:
        return v if isinstance(v, bool) else True


class KeywordHit(SchemaBase):
    keyword: str
    count: int = Field(..., ge=1)


class Analysis(SchemaBase):
    total_length: int
    word_count: int
    line_count: int
    keywords_found: list[KeywordHit] = Field(default_factory=list)
    keyword_density: float = Field(0.0, description="Keyword occurrences per 100 words")
    has_timestamps: bool
    has_call_to_action: bool
    has_hashtags: bool
    has_links: bool
    seo_score: int = Field(..., ge=0, le=100)
    rating: Rating


class DescriptionSections(SchemaBase):
    """Exact text of each section as it appears in the composed description."""

    hook: str
    overview: str
    key_points: str
    timestamps: str
    call_to_action: str
    links: Optional[str] = None
    social_links: Optional[str] = None
    seo_keywords: str


class DescriptionResult(SchemaBase):
    title: str
    concept: str
    generated_at: str
    description: str
    sections: DescriptionSections
    hashtags: list[str] = Field(default_factory=list)
    analysis: Analysis
    recommendations: list[str] = Field(default_factory=list)
    seo_tips: list[str] = Field(default_factory=list)

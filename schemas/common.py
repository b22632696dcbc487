from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from .base import SchemaBase


class RankedKeyword(SchemaBase):
    """One entry of a keyword-analyzer ranking. Only `keyword` is consumed."""

    model_config = ConfigDict(extra="allow")

    keyword: str


def _drop_malformed(entries: Any) -> list[Any]:
    if not isinstance(entries, list):
        return []
    return [
        e for e in entries
        if isinstance(e, RankedKeyword) or (isinstance(e, dict) and isinstance(e.get("keyword"), str))
    ]


class RecommendedKeywords(SchemaBase):
    """Ranked keyword lists. Lists other than primary/secondary are allowed and ignored."""

    model_config = ConfigDict(extra="allow")

    primary: list[RankedKeyword] = Field(default_factory=list)
    secondary: list[RankedKeyword] = Field(default_factory=list)

    @field_validator("primary", "secondary", mode="before")
    @classmethod
    def _lenient_list(cls, v: Any) -> list[dict[str, Any]]:
        return _drop_malformed(v)


class KeywordSet(SchemaBase):
    """Keyword data as produced by an upstream keyword analyzer."""

    model_config = ConfigDict(extra="allow")

    recommended: RecommendedKeywords = Field(default_factory=RecommendedKeywords)

    @field_validator("recommended", mode="before")
    @classmethod
    def _lenient_recommended(cls, v: Any) -> Any:
        if isinstance(v, (dict, RecommendedKeywords)):
            return v
        return {}

"""Description writer agent.

This agent is deterministic: apart from `generated_at`, the same request always
produces the same description, analysis and recommendations.

Pipeline (one way, no stage reads back from a later one):
  request -> keyword list -> sections -> composed description -> analysis -> recommendations
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from agents.base import BaseAgent
from agents.errors import InvalidInput
from app_logging.run_logger import RunLogger, new_id, utc_iso
from content_factory.analyzer import analyze_description
from content_factory.composer import compose_description
from content_factory.recommendations import generate_recommendations, seo_tips
from lib.keywords import extract_keywords
from schemas.description import DescriptionRequest, DescriptionResult


REQUIRED_FIELDS = ("title", "concept")


def parse_request(input: DescriptionRequest | Mapping[str, Any] | None) -> DescriptionRequest:
    """Validate and default a raw request.

    Raises InvalidInput when title/concept are missing or blank. Malformed optional
    fields never raise; the schema coerces them back to their defaults.
    """
    if isinstance(input, DescriptionRequest):
        return input
    if not isinstance(input, Mapping):
        raise InvalidInput("Request must be an object with title and concept")

    try:
        return DescriptionRequest.model_validate(dict(input))
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        if not fields or set(fields) <= set(REQUIRED_FIELDS):
            raise InvalidInput("Title and concept are required") from e
        raise InvalidInput(f"Invalid request fields: {', '.join(fields)}") from e


class DescriptionWriterAgent(BaseAgent):
    """Compose, score, and critique an SEO-friendly YouTube description."""

    name = "description-writer"

    def __init__(self, run_logger: Optional[RunLogger] = None) -> None:
        self.run_logger = run_logger

    def compose(self, input: DescriptionRequest | Mapping[str, Any]) -> DescriptionResult:
        request_id = new_id()
        logged_input = input.to_dict() if isinstance(input, DescriptionRequest) else input
        if self.run_logger:
            self.run_logger.start(self.name, request_id, logged_input)

        try:
            req = parse_request(input)
        except InvalidInput as e:
            if self.run_logger:
                self.run_logger.error(self.name, request_id, logged_input, e)
            raise

        keywords = extract_keywords(req.keywords)
        composed = compose_description(req, keywords)
        analysis = analyze_description(composed.document, keywords)

        result = DescriptionResult(
            title=req.title,
            concept=req.concept,
            generated_at=utc_iso(),
            description=composed.document,
            sections=composed.sections,
            hashtags=composed.hashtags,
            analysis=analysis,
            recommendations=generate_recommendations(analysis),
            seo_tips=seo_tips(),
        )

        if self.run_logger:
            self.run_logger.end(
                self.name,
                request_id,
                {"title": result.title, "description_length": analysis.total_length},
                metrics={
                    "seo_score": analysis.seo_score,
                    "rating": analysis.rating,
                    "keywords_found": len(analysis.keywords_found),
                },
            )

        return result

    def run(self, input: DescriptionRequest | Mapping[str, Any]) -> dict[str, Any]:
        return self.compose(input).to_dict()


def compose(request: DescriptionRequest | Mapping[str, Any]) -> DescriptionResult:
    return DescriptionWriterAgent().compose(request)

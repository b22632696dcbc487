from __future__ import annotations

import unittest

from content_factory.composer import SECTION_SEPARATOR, compose_description
from content_factory.sections import PLACEHOLDER_NOTE
from schemas.description import DescriptionRequest


def _request(**overrides) -> DescriptionRequest:
    payload = {"title": "Learn Guitar Fast", "concept": "guitar basics"}
    payload.update(overrides)
    return DescriptionRequest.model_validate(payload)


class TestComposer(unittest.TestCase):
    def test_minimal_request_section_order(self) -> None:
        composed = compose_description(_request(), [])
        s = composed.sections

        self.assertIsNone(s.links)
        self.assertIsNone(s.social_links)

        expected = SECTION_SEPARATOR.join([
            s.hook,
            s.overview,
            s.key_points,
            s.timestamps,
            s.call_to_action,
            s.seo_keywords,
            "\n" + " ".join(composed.hashtags),
        ])
        self.assertEqual(composed.document, expected)
        self.assertIn(PLACEHOLDER_NOTE, composed.document)

    def test_full_request_section_order(self) -> None:
        composed = compose_description(
            _request(
                timestamps=[{"time": "0:00", "label": "Intro"}],
                links=["https://example.com"],
                socialLinks={"twitter": "https://twitter.com/me"},
            ),
            ["guitar chords"],
        )
        s = composed.sections
        expected = SECTION_SEPARATOR.join([
            s.hook,
            s.overview,
            s.key_points,
            s.timestamps,
            s.call_to_action,
            s.links,
            s.social_links,
            s.seo_keywords,
            "\n" + " ".join(composed.hashtags),
        ])
        self.assertEqual(composed.document, expected)
        self.assertEqual(s.timestamps, "TIMESTAMPS:\n0:00 - Intro")
        self.assertNotIn(PLACEHOLDER_NOTE, composed.document)

    def test_links_follow_call_to_action_directly(self) -> None:
        composed = compose_description(_request(links=["https://example.com"]), [])
        s = composed.sections
        self.assertIn(s.call_to_action + SECTION_SEPARATOR + s.links, composed.document)

    def test_hashtag_line_is_prefixed_with_newline(self) -> None:
        composed = compose_description(_request(), [])
        self.assertTrue(composed.document.endswith("\n\n\n#guitarbasics #youtube #tutorial"))

    def test_hashtags_computed_even_when_not_appended(self) -> None:
        composed = compose_description(_request(includeHashtags=False), ["chords"])
        self.assertEqual(composed.hashtags, ["#guitarbasics", "#chords", "#youtube", "#tutorial"])
        self.assertNotIn("#", composed.document)
        self.assertTrue(composed.document.endswith(composed.sections.seo_keywords))

    def test_empty_optional_data_omits_sections_entirely(self) -> None:
        composed = compose_description(_request(links=[], socialLinks={}), [])
        self.assertNotIn("RESOURCES & LINKS", composed.document)
        self.assertNotIn("CONNECT WITH ME", composed.document)
        self.assertNotIn(SECTION_SEPARATOR * 2, composed.document)

    def test_breakdown_matches_document(self) -> None:
        composed = compose_description(
            _request(contentStyle="review", links=["https://a.example"], socialLinks={"discord": "d"}),
            ["a", "b"],
        )
        for text in composed.sections.model_dump(exclude_none=True).values():
            self.assertIn(text, composed.document)

from __future__ import annotations

import unittest

from content_factory.sections import (
    MAX_HASHTAG_LENGTH,
    MAX_HASHTAGS,
    PLACEHOLDER_NOTE,
    RULE,
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
    to_hashtag,
)
from schemas.description import Timestamp
from styles.content_style import ContentStyle, get_style_profile, resolve_content_style


class TestStyleProfiles(unittest.TestCase):
    def test_every_style_has_a_profile(self) -> None:
        for style in ContentStyle:
            profile = get_style_profile(style)
            self.assertEqual(len(profile["key_points"]), 5)
            self.assertEqual(len(profile["placeholder_timestamps"]), 5)
            self.assertIn("{concept}", profile["hook_template"])

    def test_unknown_style_resolves_to_none(self) -> None:
        self.assertIsNone(resolve_content_style("podcast"))
        self.assertIsNone(resolve_content_style(None))
        self.assertEqual(resolve_content_style("review"), ContentStyle.review)

    def test_style_lookup_is_exact(self) -> None:
        self.assertIsNone(resolve_content_style("Review "))
        self.assertIsNone(resolve_content_style("REVIEW"))
        self.assertEqual(get_style_profile("Review ")["overview_noun"], "video")


class TestHook(unittest.TestCase):
    def test_tutorial_hook_puts_title_first(self) -> None:
        hook = generate_hook("Learn Guitar Fast", "guitar basics", "tutorial")
        self.assertTrue(hook.startswith("Learn Guitar Fast\n\nIn this comprehensive guitar basics tutorial"))

    def test_each_style_has_its_own_opening(self) -> None:
        self.assertIn("Is drones worth your time and money?", generate_hook("T", "drones", "review"))
        self.assertIn("Join me as I explore drones", generate_hook("T", "drones", "vlog"))
        self.assertIn("Get ready for an amazing drones experience!", generate_hook("T", "drones", "entertainment"))
        self.assertIn("Want to understand drones?", generate_hook("T", "drones", "educational"))

    def test_unknown_style_uses_tutorial_hook(self) -> None:
        self.assertEqual(
            generate_hook("T", "drones", "podcast"),
            generate_hook("T", "drones", "tutorial"),
        )

    def test_concept_is_interpolated_verbatim(self) -> None:
        hook = generate_hook("T", "<b>{weird}</b>", "tutorial")
        self.assertIn("comprehensive <b>{weird}</b> tutorial", hook)


class TestOverview(unittest.TestCase):
    def test_general_audience(self) -> None:
        overview = generate_overview("chess", "tutorial", "general")
        lines = overview.split("\n")
        self.assertEqual(lines[0], "This step-by-step guide covers:")
        self.assertEqual(lines[1], "* The fundamentals of chess")
        self.assertEqual(len(lines), 5)

    def test_specific_audience(self) -> None:
        overview = generate_overview("chess", "review", "club players")
        self.assertTrue(overview.startswith("Perfect for club players, this in-depth review covers:\n"))

    def test_unknown_style_noun_is_video_not_tutorial(self) -> None:
        self.assertTrue(generate_overview("chess", "podcast", "general").startswith("This video covers:"))
        self.assertTrue(generate_overview("chess", "entertainment", "general").startswith("This video covers:"))


class TestKeyPoints(unittest.TestCase):
    def test_header_and_five_bullets(self) -> None:
        text = generate_key_points("review")
        lines = text.split("\n")
        self.assertEqual(lines[0], "WHAT YOU'LL LEARN:")
        self.assertEqual(lines[1:], [
            "* Pros and cons breakdown",
            "* Real-world performance",
            "* Value for money analysis",
            "* Comparison with alternatives",
            "* Final verdict",
        ])

    def test_vlog_and_unknown_reuse_tutorial_list(self) -> None:
        tutorial = generate_key_points("tutorial")
        self.assertEqual(generate_key_points("vlog"), tutorial)
        self.assertEqual(generate_key_points("entertainment"), tutorial)
        self.assertEqual(generate_key_points("unheard-of"), tutorial)
        self.assertNotEqual(generate_key_points("educational"), tutorial)


class TestTimestamps(unittest.TestCase):
    def test_supplied_timestamps_render_in_order(self) -> None:
        text = format_timestamps([
            Timestamp(time="0:00", label="Intro"),
            Timestamp(time="2:15", label="Chords"),
        ])
        self.assertEqual(text, "TIMESTAMPS:\n0:00 - Intro\n2:15 - Chords")

    def test_placeholders_end_with_update_note(self) -> None:
        text = generate_placeholder_timestamps("review")
        self.assertTrue(text.startswith("TIMESTAMPS:\n0:00 - Introduction\n1:00 - Unboxing/Overview"))
        self.assertTrue(text.endswith("\n\n" + PLACEHOLDER_NOTE))

    def test_placeholder_fallback(self) -> None:
        tutorial = generate_placeholder_timestamps("tutorial")
        self.assertIn("5:00 - Main Tutorial", tutorial)
        self.assertEqual(generate_placeholder_timestamps("vlog"), tutorial)
        self.assertEqual(generate_placeholder_timestamps("???"), tutorial)
        self.assertIn("2:00 - Core Concepts", generate_placeholder_timestamps("educational"))


class TestFixedBlocks(unittest.TestCase):
    def test_call_to_action_is_framed_and_constant(self) -> None:
        cta = generate_call_to_action()
        lines = cta.split("\n")
        self.assertEqual(lines[0], RULE)
        self.assertEqual(lines[-1], RULE)
        self.assertEqual(len(RULE), 40)
        self.assertEqual(len(lines), 8)
        for word in ("LIKE", "SUBSCRIBE", "COMMENT", "SHARE"):
            self.assertIn(word, cta)
        self.assertEqual(cta, generate_call_to_action())

    def test_links_are_verbatim_and_ordered(self) -> None:
        text = format_links(["https://b.example/x?y=1", "not even a url"])
        self.assertEqual(text, "RESOURCES & LINKS:\nhttps://b.example/x?y=1\nnot even a url")

    def test_social_links_use_display_names(self) -> None:
        text = format_social_links({"github": "https://github.com/me", "mastodon": "https://m.social/@me"})
        self.assertEqual(
            text,
            "CONNECT WITH ME:\nGitHub: https://github.com/me\nmastodon: https://m.social/@me",
        )


class TestSeoParagraph(unittest.TestCase):
    def test_deduplicates_and_caps_at_eight(self) -> None:
        keywords = ["k0", "k1", "k0"] + [f"k{i}" for i in range(2, 10)]
        text = generate_seo_paragraph("drones", keywords)
        self.assertTrue(text.startswith(RULE + "\n\n"))
        self.assertIn("This video about drones covers topics including: k0, k1, k2, k3, k4, k5, k6, k7. ", text)
        self.assertNotIn("k8", text)

    def test_no_keywords(self) -> None:
        text = generate_seo_paragraph("drones", [])
        self.assertIn("covers topics including: . Whether", text)


class TestHashtags(unittest.TestCase):
    def test_transform(self) -> None:
        self.assertEqual(to_hashtag("Guitar  Basics\tNow"), "#guitarbasicsnow")

    def test_order_and_defaults(self) -> None:
        tags = generate_hashtags("Guitar Basics", ["chords", "Guitar Basics", "x" * 40])
        self.assertEqual(tags, ["#guitarbasics", "#chords", "#youtube", "#tutorial"])

    def test_only_first_five_keywords_and_eight_total(self) -> None:
        keywords = [f"kw{i}" for i in range(9)]
        tags = generate_hashtags("drones", keywords)
        self.assertEqual(len(tags), MAX_HASHTAGS)
        self.assertEqual(tags, ["#drones", "#kw0", "#kw1", "#kw2", "#kw3", "#kw4", "#youtube", "#tutorial"])

    def test_punctuation_variants_are_duplicates(self) -> None:
        tags = generate_hashtags("guitar basics", ["guitar-basics", "YouTube", "tutorial!"])
        self.assertEqual(tags, ["#guitarbasics", "#youtube", "#tutorial!"])

    def test_invariants_hold_for_long_concept(self) -> None:
        tags = generate_hashtags("a concept that is much too long for a tag", ["short"])
        self.assertEqual(tags, ["#short", "#youtube", "#tutorial"])
        for tag in tags:
            self.assertLessEqual(len(tag), MAX_HASHTAG_LENGTH)
        self.assertEqual(len(tags), len(set(t.lower() for t in tags)))

from __future__ import annotations

from typing import Any

from styles.content_style import ContentStyle


WRITE_DESCRIPTION_TOOL = "writeDescription"


def write_description_tool() -> dict[str, Any]:
    """Catalog entry for the writeDescription tool (JSON schema of DescriptionRequest)."""
    return {
        "name": WRITE_DESCRIPTION_TOOL,
        "description": "Generate an SEO-optimized YouTube description",
        "inputSchema": {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "The video title"},
                "concept": {"type": "string", "description": "The video concept/topic"},
                "keywords": {"type": "object", "description": "Keywords data from analyzer"},
                "contentStyle": {
                    "type": "string",
                    "enum": [s.value for s in ContentStyle],
                    "description": "Style of content",
                },
                "targetAudience": {"type": "string", "description": "Target audience"},
                "timestamps": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "time": {"type": "string"},
                            "label": {"type": "string"},
                        },
                    },
                    "description": "Video timestamps",
                },
                "links": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Related links to include",
                },
                "socialLinks": {"type": "object", "description": "Social media links"},
                "includeHashtags": {"type": "boolean", "default": True},
            },
            "required": ["title", "concept"],
        },
    }


def list_tools() -> list[dict[str, Any]]:
    return [write_description_tool()]

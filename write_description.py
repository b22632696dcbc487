from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from agents.description_agent import DescriptionWriterAgent
from agents.errors import InvalidInput
from app_logging.run_logger import RunLogger
from lib.settings import settings_from_env


def load_request_file(path: Path) -> Any:
    """Load a request from .json/.yaml/.yml. YAML is a superset of JSON, so one loader covers both."""
    if not path.exists():
        raise FileNotFoundError(f"Request file not found: {path}")
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Compose an SEO-scored YouTube description from a request file")
    ap.add_argument("--request", required=True, help="Path to a JSON or YAML DescriptionRequest")
    ap.add_argument("--out", default=None, help="Write the output here instead of stdout")
    ap.add_argument(
        "--description-only",
        action="store_true",
        help="Emit only the composed description text (no analysis JSON)",
    )
    args = ap.parse_args(argv)

    try:
        raw = load_request_file(Path(args.request))
    except (OSError, yaml.YAMLError) as e:
        print(f"[error] Could not read request: {e}")
        return 2

    settings = settings_from_env()
    run_logger = RunLogger(log_path=settings.run_log_path) if settings.run_log_path else None
    agent = DescriptionWriterAgent(run_logger=run_logger)

    try:
        result = agent.run(raw)
    except InvalidInput as e:
        print(f"[error] Invalid request: {e}")
        return 1

    if args.description_only:
        text = result["description"]
    else:
        text = json.dumps(result, indent=2, ensure_ascii=False)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        analysis = result["analysis"]
        print(f"Wrote description: {out_path}")
        print(f"SEO score: {analysis['seoScore']} ({analysis['rating']})")
    else:
        print(text)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

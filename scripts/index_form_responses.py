"""Embed form responses from a JSON file and store them for connection generation.

Input format:
    {"form_id": "...", "responses": [{"response_id": "...", "respondent_name": "...", "text": "..."}]}

Usage:
    python scripts/index_form_responses.py data/sample_form_responses.json
    python scripts/index_form_responses.py responses.json --dry-run
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from config.settings import configure_logging, get_settings
from src.bootstrap import build_response_services
from src.errors import MentorMatchError


def load_responses(path: Path) -> tuple[str, list[dict]]:
    with open(path) as f:
        data = json.load(f)
    return data["form_id"], data.get("responses", [])


def main():
    parser = argparse.ArgumentParser(description="Index form responses")
    parser.add_argument("path", type=Path, help="JSON file with form responses")
    parser.add_argument("--dry-run", action="store_true", help="Preview without changes")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings)

    form_id, responses = load_responses(args.path)
    print(f"Form {form_id!r}: {len(responses)} responses")

    if args.dry_run:
        for r in responses:
            print(f"  [DRY-RUN] {r['response_id']} ({r['respondent_name']}): {r['text'][:60]!r}")
        return

    try:
        services = build_response_services(settings)
        services.indexer.ensure_index()
    except MentorMatchError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    stored = skipped = failed = 0
    for r in responses:
        try:
            record_id = services.indexer.index_form_response(
                form_id=form_id,
                response_id=r["response_id"],
                respondent_name=r["respondent_name"],
                text=r.get("text", ""),
            )
        except MentorMatchError as e:
            print(f"  FAILED {r['response_id']}: {e}")
            failed += 1
            continue
        if record_id is None:
            skipped += 1
        else:
            stored += 1

    print(f"Stored: {stored}, skipped (empty text): {skipped}, failed: {failed}")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()

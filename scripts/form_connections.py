"""Print the ranked response connections for a form.

Usage:
    python scripts/form_connections.py career-goals-2025
    python scripts/form_connections.py career-goals-2025 --top 10 --json
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from config.settings import configure_logging, get_settings
from src.bootstrap import build_response_services
from src.errors import MentorMatchError


def main():
    parser = argparse.ArgumentParser(description="Show response connections for a form")
    parser.add_argument("form_id")
    parser.add_argument("--top", type=int, default=None, help="Only show the N best pairs")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings)

    try:
        services = build_response_services(settings)
        connections = services.connections.generate_connections(args.form_id)
    except MentorMatchError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if args.top is not None:
        connections = connections[: args.top]

    if args.json:
        print(json.dumps([asdict(c) for c in connections], indent=2))
        return

    print(f"{len(connections)} connections for form {args.form_id!r}")
    for c in connections:
        print(f"  {c.similarity_score:.4f}  {c.response1_name} ({c.response1_id}) <-> "
              f"{c.response2_name} ({c.response2_id})")


if __name__ == "__main__":
    main()

"""Create or clear the responses index.

Usage:
    python scripts/manage_index.py init
    python scripts/manage_index.py clear
    python scripts/manage_index.py clear --namespace ns1
    python scripts/manage_index.py clear --index other-index
"""

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from config.settings import configure_logging, get_settings
from src.bootstrap import build_response_services
from src.errors import MentorMatchError


def main():
    parser = argparse.ArgumentParser(description="Manage the responses vector index")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("init", help="Create the index if it does not exist")
    clear = sub.add_parser("clear", help="Delete all records in one namespace")
    clear.add_argument("--index", default=None, help="Index name (default: RESPONSES_INDEX)")
    clear.add_argument("--namespace", default=None, help="Namespace to clear (default: the default namespace)")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings)

    try:
        services = build_response_services(settings)
        if args.command == "init":
            created = services.indexer.ensure_index()
            print(f"Index {services.store.index_name!r}: {'created' if created else 'already exists'}")
        else:
            services.indexer.clear_index(index_name=args.index, namespace=args.namespace)
            print("Clear finished")
    except MentorMatchError as e:
        print(f"ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

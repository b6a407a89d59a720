from __future__ import annotations

import argparse
import os
import sys

from app.core.migrations import SchemaError, downgrade, upgrade


DEFAULT_DATABASE_URL = os.getenv("DATABASE_URL")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Apply or revert the cities/people schema.")
    p.add_argument("direction", choices=["up", "down"])
    p.add_argument("--database-url", default=DEFAULT_DATABASE_URL, help="defaults to settings.database_url")
    p.add_argument("--revision", help="target revision (default: head for up, base for down)")
    p.add_argument("--yes", action="store_true", help="required for down (safety)")
    args = p.parse_args(argv)

    if args.direction == "down" and not args.yes:
        print("Refusing to drop tables without --yes (safety).", file=sys.stderr)
        return 2

    try:
        if args.direction == "up":
            upgrade(args.database_url, args.revision or "head")
        else:
            downgrade(args.database_url, args.revision or "base")
    except SchemaError as e:
        print(f"Migration failed: {e}", file=sys.stderr)
        return 1

    print(f"Migration {args.direction} complete.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""Apply Alembic migrations to the configured database.

    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py 3c1f9a7d2e40 # upgrade to a revision
    python scripts/run_migrations.py --sql        # print SQL, touch nothing
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from remark.config import Settings
from remark.util.observability import configure_logfire


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--sql", action="store_true", help="emit SQL instead of running it"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Upgrade the schema, reporting failures to logfire."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logfire(Settings())

    with logfire.span("migrations.upgrade", revision=args.revision, sql=args.sql):
        try:
            command.upgrade(Config("alembic.ini"), args.revision, sql=args.sql)
        except Exception:
            # The container must not start against a half-migrated schema
            logfire.exception("Database migration failed", revision=args.revision)
            raise

    logfire.info("Database migrated", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Push database management CLI.

Creates and drops the push notification schema when the domain is
configured with an RDBMS provider (SQLite or PostgreSQL).

Usage:
    python src/manage.py setup-db   # Create tables
    python src/manage.py drop-db    # Drop tables
"""

import argparse
import sys


def setup_database():
    """Create the push database schema."""
    from push.domain import push
    from push.utils.db import setup_db

    print("Initializing push domain...")
    push.init()
    print("Creating push database schema...")
    setup_db(push)
    print("Done.")


def drop_database():
    """Drop the push database schema."""
    from push.domain import push
    from push.utils.db import drop_db

    print("Initializing push domain...")
    push.init()
    print("Dropping push database schema...")
    drop_db(push)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Push database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

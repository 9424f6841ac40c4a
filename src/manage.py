"""Printz database management CLI.

Creates and drops the printing domain's tables. Only SQL providers are
touched; the in-memory provider needs no schema.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from printing.domain import printing
    from printing.utils.db import setup_db

    print("Initializing printing domain...")
    printing.init()
    print("Creating printing database schema...")
    setup_db(printing)
    print("Done.")


def drop_database():
    from printing.domain import printing
    from printing.utils.db import drop_db

    print("Initializing printing domain...")
    printing.init()
    print("Dropping printing database schema...")
    drop_db(printing)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Printz database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

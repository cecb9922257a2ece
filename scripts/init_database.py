#!/usr/bin/env python
"""
Database initialization script for DSMovie.

Creates the schema (movies, scores, users, roles) and loads the seed
users and movies.

Usage:
    # Create tables and seed an empty database
    python scripts/init_database.py

    # Start over from an empty schema
    python scripts/init_database.py --reset

    # Create tables only
    python scripts/init_database.py --no-seed
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import func, select

from dsmovie.database import init_database, verify_schema
from dsmovie.database.models import Movie, Score, User
from dsmovie.utils.logging_config import setup_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def print_contents(db_manager):
    """Print row counts for the main tables."""
    print_section("Verification")
    with db_manager.session_scope() as session:
        print(f"  Movies: {session.scalar(select(func.count(Movie.id))):,}")
        print(f"  Users:  {session.scalar(select(func.count(User.id))):,}")
        print(f"  Scores: {session.scalar(select(func.count()).select_from(Score)):,}")


def main():
    """Main entry point for database initialization."""

    parser = argparse.ArgumentParser(
        description="Initialize the DSMovie database",
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--no-seed',
        action='store_true',
        help='Do not load seed users and movies'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default='data/dsmovie.db',
        help='Path to SQLite database file (default: data/dsmovie.db)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        help='Logging level (default: INFO)'
    )

    args = parser.parse_args()
    setup_logging(level=args.log_level)

    print_section("DSMovie Database Initialization")
    print(f"Database: {args.db_path}")
    print(f"Mode: {'Reset' if args.reset else 'Keep existing'}")

    db_manager = init_database(db_path=args.db_path, reset=args.reset, seed=not args.no_seed)

    if not verify_schema(db_manager):
        print("\n[ERROR] Database initialization failed!")
        sys.exit(1)

    print_contents(db_manager)
    print("\n[SUCCESS] Database ready.")


if __name__ == "__main__":
    main()

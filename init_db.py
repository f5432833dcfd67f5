#!/usr/bin/env python3
import os
import argparse

from workout_app.database import DatabaseStorage


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the workout tables and load the starter plan.")
    parser.add_argument("--database-url", default=os.environ.get("DATABASE_URL"),
                        help="SQLAlchemy URL (default: $DATABASE_URL)")
    parser.add_argument("--force", action="store_true",
                        help="Seed the starter plan even if workout days already exist")
    args = parser.parse_args(argv)

    if not args.database_url:
        print("DATABASE_URL is not set. Pass --database-url or export DATABASE_URL.")
        return 1

    storage = DatabaseStorage(args.database_url)
    try:
        storage.create_all()
        created = storage.seed_defaults(force=args.force)
    finally:
        storage.dispose()

    if created:
        print(f"Seeded {created} workout days.")
    else:
        print("Workout days already exist, nothing seeded (use --force to seed anyway).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

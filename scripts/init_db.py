from __future__ import annotations

import argparse
import logging

from pantry_planner import crud
from pantry_planner.db import SessionLocal, upgrade_db
from pantry_planner.logging_utils import configure_logging
from pantry_planner.settings import settings

logger = logging.getLogger("pantry_planner.init_db")


def main() -> None:
    parser = argparse.ArgumentParser(description="Migrate the database and optionally issue a user API key.")
    parser.add_argument("--user", help="username to create and issue an API key for")
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL)
    upgrade_db()
    logger.info("DB migrated (alembic upgrade head) at %s", settings.DATABASE_URL)

    if args.user:
        with SessionLocal() as db:
            user = crud.get_or_create_user(db, args.user)
            token = crud.rotate_user_api_key(db, user.id)
        print(f"API key for {args.user}: {token}")


if __name__ == "__main__":
    main()

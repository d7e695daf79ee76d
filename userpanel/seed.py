"""
CLI entrypoint for inserting the seed roles and demo accounts. Run after migrations:

  python -m userpanel.seed

Safe to run repeatedly; rows that already exist are skipped.
"""

import logging
import sys

from userpanel.core.config import get_settings
from userpanel.core.database import SessionLocal
from userpanel.core.security import get_password_hasher
from userpanel.services.seed import seed_initial_data

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run the seed step against DATABASE_URL."""
    settings = get_settings()
    db = SessionLocal()
    try:
        inserted = seed_initial_data(db, get_password_hasher(settings))
        logger.info("Seed completed: rows_inserted=%s", inserted)
        return 0
    except Exception as e:
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())

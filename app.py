from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from filedb import DuplicateKey, FileDB, FileDBError
from settings import get_settings

logger = logging.getLogger(__name__)

# Values may contain the separator; only keys are restricted.
DEMO_ENTRIES = (
    ("clave1", "nope"),
    ("clave3", '{"hellothere":"data"}'),
)


def run(path: str) -> int:
    """Open the DB, add a couple of entries and persist them. Returns an exit code."""
    try:
        db = FileDB(path)
    except FileDBError as e:
        logger.error("OPEN: %s: %s", path, e)
        return 1

    status = 0
    try:
        for key, value in DEMO_ENTRIES:
            try:
                db.create(key, value)
            except DuplicateKey:
                logger.info("CREATE: %s already present, keeping %r", key, db.read(key))
            except FileDBError as e:
                logger.warning("CREATE: %s failed: %s", key, e)
                status = 1
    finally:
        try:
            db.close()
        except FileDBError as e:
            logger.error("CLOSE: %s: %s", path, e)
            status = 1
    return status


def main() -> int:
    load_dotenv("local.env")
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(settings.db_path)


if __name__ == "__main__":
    sys.exit(main())

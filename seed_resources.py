# seed_resources.py
"""
Populate the initial mental-health resources.
Usage: python seed_resources.py

Running it again is a no-op once the resources table has rows.
"""

import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.resource import Resource  # noqa: F401
from app.services.resource_seed import seed_resources


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    Base.metadata.create_all(bind=engine, tables=[Resource.__table__])

    db = SessionLocal()
    try:
        inserted = seed_resources(db)
    except Exception:
        db.rollback()
        logging.exception("Error seeding resources")
        return 1
    finally:
        db.close()

    print(f"Inserted {inserted} resources")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Fill the database with a sample portfolio.

Usage:
    python -m rentdash.seed [--seed N] [--properties N] [--reset]
"""

import argparse
import logging

from rentdash.core.config import settings
from rentdash.core.database import Base, SessionLocal, engine
from rentdash.core.logging import setup_logging
from rentdash.services.sample_data import clear_all, seed_sample_data

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the rental portfolio database with sample data")
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.SAMPLE_DATA_SEED,
        help="Random seed for reproducible data",
    )
    parser.add_argument(
        "--properties",
        type=int,
        default=8,
        help="Number of properties to generate (default: 8)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete every existing record first",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if args.reset:
            clear_all(db)
        summary = seed_sample_data(db, seed=args.seed, num_properties=args.properties)
    finally:
        db.close()

    logger.info("Done: %s", summary)


if __name__ == "__main__":
    main()

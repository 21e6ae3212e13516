# create_tables.py
"""Create (or, with --drop, recreate) the users and tasks tables"""
import argparse
import logging

from app.database import Base, engine
from app.models.user import User  # noqa: F401
from app.models.task import Task  # noqa: F401

logger = logging.getLogger(__name__)

def create_tables(drop: bool = False):
    """Create all tables"""
    if drop:
        Base.metadata.drop_all(bind=engine)
        logger.info("Existing tables dropped")

    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args()
    create_tables(drop=args.drop)

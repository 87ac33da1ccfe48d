#!/usr/bin/env python3
"""
Create the vocabulary deck tables on a fresh database.

Production databases should be migrated with ``alembic upgrade head`` instead.
"""
import sys
import logging

from vocabdecks.core.database import engine, init_db

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logger.info(f"Creating tables on {engine.url.render_as_string(hide_password=True)}...")
    try:
        init_db()
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error creating tables: %s", e, exc_info=True)
        sys.exit(1)

"""
Database schema setup
Usage:
    python db_migrate.py                      # create any missing tables
    python db_migrate.py <migration_file.sql> # also run a SQL migration file
"""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from sqlalchemy import text

from timesync import models  # noqa: F401
from timesync.database import Base, engine

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def initialize_database():
    """Create every table that does not exist yet"""
    logger.info("Initializing database schema...")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database schema initialized successfully.")


def run_migration(migration_file_path: str):
    """Run a SQL migration file"""
    migration_file = Path(migration_file_path)

    if not migration_file.exists():
        logger.error(f"Migration file not found: {migration_file}")
        sys.exit(1)

    logger.info(f"Reading migration file: {migration_file}")
    sql = migration_file.read_text()

    statements = [s.strip() for s in sql.split(';') if s.strip() and not s.strip().startswith('--')]

    logger.info(f"Found {len(statements)} SQL statements to execute")

    with engine.connect() as conn:
        for i, stmt in enumerate(statements, 1):
            logger.info(f"Executing statement {i}/{len(statements)}...")
            conn.execute(text(stmt))
        conn.commit()

    logger.info("Migration completed successfully")


if __name__ == "__main__":
    try:
        initialize_database()
        if len(sys.argv) > 1:
            run_migration(sys.argv[1])
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        sys.exit(1)

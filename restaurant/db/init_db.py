import logging

import psycopg2
from psycopg2.extensions import ISOLATION_LEVEL_AUTOCOMMIT
from sqlalchemy.orm import Session

from restaurant.core.config import settings
from restaurant.core.security import get_password_hash, is_password_hash
from restaurant.models.config_entry import ConfigEntry
from restaurant.models.user import User

logger = logging.getLogger(__name__)

PASSWORDS_HASHED_KEY = "passwords_hashed"


def create_database():
    """Create database if it doesn't exist."""
    if not settings.DATABASE_URL.startswith("postgresql"):
        logger.info("Skipping database creation for non-PostgreSQL URL.")
        return
    try:
        # Connect to default 'postgres' database to check/create target DB
        con = psycopg2.connect(
            user=settings.POSTGRES_USER,
            password=settings.POSTGRES_PASSWORD,
            host=settings.POSTGRES_SERVER,
            port=settings.POSTGRES_PORT,
            dbname="postgres"
        )
        con.set_isolation_level(ISOLATION_LEVEL_AUTOCOMMIT)
        cur = con.cursor()

        cur.execute("SELECT 1 FROM pg_catalog.pg_database WHERE datname = %s", (settings.POSTGRES_DB,))
        exists = cur.fetchone()

        if not exists:
            logger.info("Database %s does not exist. Creating...", settings.POSTGRES_DB)
            cur.execute(f'CREATE DATABASE "{settings.POSTGRES_DB}"')
            logger.info("Database %s created successfully.", settings.POSTGRES_DB)
        else:
            logger.info("Database %s already exists.", settings.POSTGRES_DB)

        cur.close()
        con.close()
    except psycopg2.Error as e:
        logger.error("Error creating database: %s", e)
        # Proceeding anyway, maybe it exists or connection params are for the target DB directly


def migrate_plaintext_passwords(db: Session) -> int:
    """
    Replace any password stored in clear text with its bcrypt hash.

    Runs once: a ``passwords_hashed`` config entry is written on success and
    later calls return immediately. Everything happens in one transaction.
    Returns the number of passwords hashed.
    """
    marker = db.query(ConfigEntry).filter(ConfigEntry.config_key == PASSWORDS_HASHED_KEY).first()
    if marker:
        logger.info("Passwords already hashed - skipping")
        return 0

    try:
        users = (
            db.query(User)
            .filter(User.password_hash.isnot(None), User.password_hash != "")
            .all()
        )
        plaintext = [u for u in users if not is_password_hash(u.password_hash)]
        for user in plaintext:
            user.password_hash = get_password_hash(user.password_hash)

        db.add(ConfigEntry(config_key=PASSWORDS_HASHED_KEY, config_value="true"))
        db.commit()
    except Exception:
        db.rollback()
        raise

    if plaintext:
        logger.info("Successfully hashed %d passwords", len(plaintext))
    else:
        logger.info("All passwords appear to be hashed already")
    return len(plaintext)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_database()

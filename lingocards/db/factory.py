from typing import Optional

from lingocards.config import Settings, get_settings
from lingocards.db.database import Database


def make_database(settings: Optional[Settings] = None) -> Database:
    """
    Create a database from settings.

    Returns:
        Database: engine and session factory bound to the configured URL
    """
    settings = settings or get_settings()
    return Database(
        settings.postgres_database_url,
        echo=settings.postgres_echo_sql,
    )

"""Create the Lodge Chat schema on the configured database."""

import logging

from lodge_chat.core.settings import settings
from lodge_chat.db.session import create_tables, engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()
    logger.info("Database initialized at %s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    init_db()

"""Database initialization entrypoint."""

from devman.core import get_logger, setup_logging
from devman.db import Base, engine

logger = get_logger(__name__)


def init_db() -> None:
    """Create any missing tables on the configured database."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready on %s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    setup_logging()
    init_db()

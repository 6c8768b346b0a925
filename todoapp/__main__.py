# todoapp/__main__.py
"""
Run the API: python -m todoapp

Exits with status 1 when DATABASE_URL is missing or the database cannot be
reached, leaving restarts to the process supervisor.
"""
import logging
import sys

import uvicorn

from todoapp.core.config import load_settings
from todoapp.core.database import Database
from todoapp.core.exceptions import ConfigurationError, DatabaseConnectionError
from todoapp.core.logging_config import configure_logging
from todoapp.main import create_app

logger = logging.getLogger("todoapp")


def main() -> int:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        configure_logging()
        logger.error(f"❌ {e}")
        return 1

    configure_logging(settings.log_level, settings.log_file)

    try:
        database = Database(settings.database_url)
        database.connect()
    except (ConfigurationError, DatabaseConnectionError) as e:
        logger.error(f"❌ Startup aborted: {e}")
        return 1

    app = create_app(settings, database=database)
    logger.info(f"📚 API docs available at: http://127.0.0.1:{settings.port}/docs")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())

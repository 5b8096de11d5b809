"""
Entry point for the Campus Records service.

Runs the API under uvicorn on the configured host and port (3000 unless
PORT is set).
"""

import uvicorn
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from campus_records.main import app  # noqa: E402,F401
from campus_records.utils.config import get_settings  # noqa: E402
from campus_records.utils.logger import setup_logging  # noqa: E402


def main() -> None:
    settings = get_settings()
    logger = setup_logging(settings)
    logger.info(f"Starting server on port {settings.PORT}")
    uvicorn.run(
        "app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()

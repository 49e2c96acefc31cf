"""uniconnect main entry point."""

import logging

import uvicorn

from .config.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the application."""
    settings = get_settings()
    logger.info(f"Starting uniconnect on {settings.host}:{settings.port}")
    
    uvicorn.run(
        "uniconnect.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()

# freightquote/core/logging_config.py
"""
Centralized logging configuration for the application.

Keeps the quoting engine's logs visible while turning down the HTTP server
and client libraries.
"""

import logging

from freightquote.core.config import get_settings


def configure_logging():
    """
    Configure logging for the application.

    - App code: LOG_LEVEL from settings (INFO by default)
    - HTTP clients (httpx, httpcore): WARNING only
    - uvicorn access log: WARNING only
    """
    log_level = get_settings().LOG_LEVEL.upper()
    level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Quiet noisy HTTP loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger("freightquote").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at level: {log_level}")

"""
Logging helpers.
"""

import logging
from typing import Optional

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once for the process."""
    if level is None:
        from ..config import get_settings

        level = get_settings().log_level
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT)
    # Keep third-party HTTP chatter out of application logs
    logging.getLogger("httpx").setLevel(logging.WARNING)

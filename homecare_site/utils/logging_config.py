"""Logging configuration."""
import logging
import sys
from homecare_site.config import settings


def setup_logging() -> None:
    """Configure application logging."""
    level = getattr(logging, getattr(settings, "log_level", "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

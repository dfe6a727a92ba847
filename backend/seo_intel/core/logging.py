import sys

from loguru import logger

from seo_intel.core.config import settings


def setup_logging(level: str = None) -> None:
    """Replace loguru's default sink with one at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL).upper(),
        backtrace=settings.DEBUG,
        diagnose=False,
    )

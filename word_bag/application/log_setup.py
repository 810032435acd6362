# word_bag/application/log_setup.py
import sys
from loguru import logger
from word_bag.application.settings import Settings, get_settings

def setup_logging(settings: Settings | None = None) -> None:
    """Configure Loguru once, based on Settings.debug."""
    settings = settings or get_settings()

    logger.remove()  # remove default handler(s) to avoid duplicates on re-run
    # stderr, so the driver's report on stdout stays clean
    logger.add(
        sys.stderr,
        level="DEBUG" if settings.debug else "INFO",
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        backtrace=False,
        diagnose=False,
    )

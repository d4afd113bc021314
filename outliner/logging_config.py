# outliner/logging_config.py
import logging

from .config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # Keep request-level noise out of the app log
    logging.getLogger("urllib3").setLevel(logging.WARNING)

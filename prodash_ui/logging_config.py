import logging
import os

QUIET_LOGGERS = ("urllib3", "requests", "watchdog")


def configure_logging(level_name=None):
    level_name = (level_name or os.getenv("PRODASH_UI_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

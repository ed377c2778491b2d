# distress/core/logging.py
import logging

from distress.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None):
    root = logging.getLogger()
    if root.handlers:
        # already configured (uvicorn, pytest)
        root.setLevel(level or settings.LOG_LEVEL)
        return
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT)

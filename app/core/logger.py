# core/logger.py
import logging

from app.core.config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"

logger = logging.getLogger("planner")
logger.setLevel(settings.LOG_LEVEL.upper())

# Reloading the module must not stack handlers
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

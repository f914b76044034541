# restroom_relay/core/logger.py

import logging
import os
from logging.handlers import RotatingFileHandler
from .discord_logger import send_discord_alert
from .settings import settings

# Por defecto logs/ en la raíz del proyecto; LOG_DIR lo cambia en el servidor
LOG_DIR = settings.LOG_DIR or os.path.join(os.path.dirname(__file__), "../../logs")
os.makedirs(LOG_DIR, exist_ok=True)
LOG_FILE = os.path.join(LOG_DIR, "relay.log")

logger = logging.getLogger("restroom_relay")
logger.setLevel(settings.LOG_LEVEL.upper())

if not logger.hasHandlers():
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s (%(threadName)s): %(message)s", "%Y-%m-%d %H:%M:%S"
    )

    file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5_000_000, backupCount=10, encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

# urllib3 registra cada conexión a los dispositivos, y la URL lleva el código secreto
logging.getLogger("urllib3").setLevel(logging.WARNING)


def log_critical_error(msg: str):
    """Registra el error y avisa por Discord (si hay webhook)."""
    logger.error(msg)
    send_discord_alert(msg, level="CRITICAL")

import logging
import time
import requests
from .settings import settings

# Evita mandar el mismo nivel de alerta muy seguido
_last_alert_time = {}
FLOOD_INTERVAL = 20  # segundos entre alertas iguales


def send_discord_alert(message: str, level: str = "INFO"):
    """
    Envía una alerta ligera a Discord con control de flood.
    Si no hay webhook configurado no hace nada.
    """
    if not settings.DISCORD_WEBHOOK_URL:
        return

    now = time.time()
    last_time = _last_alert_time.get(level, 0)

    if now - last_time < FLOOD_INTERVAL:
        return

    _last_alert_time[level] = now

    emoji = {
        "INFO": "ℹ️",
        "WARN": "⚠️",
        "ERROR": "🔥",
        "CRITICAL": "💀"
    }.get(level, "⚡")

    payload = {"content": f"{emoji} **[{level}] RestroomRelay:** {message}"}

    try:
        requests.post(settings.DISCORD_WEBHOOK_URL, json=payload, timeout=2)
    except requests.RequestException as e:
        # No usamos el logger de la app para no entrar en un ciclo de alertas
        logging.getLogger("restroom_relay.discord").debug(f"No se pudo enviar alerta a Discord: {e}")

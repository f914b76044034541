# restroom_relay/core/cors.py

from starlette.middleware.cors import CORSMiddleware
from .settings import settings

# Headers CORS que acompañan todas las respuestas de los relays
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": settings.CORS_ALLOW_HEADERS,
}

CORS_ALLOW_HEADERS_LIST = [h.strip() for h in settings.CORS_ALLOW_HEADERS.split(",") if h.strip()]

RELAY_PATH_SUFFIXES = ("/send-gsm-command", "/send-wifi-command")


class RelayAwareCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware para el dashboard, salvo en los relays: ellos responden
    su propio preflight (200 vacío) y ponen CORS_HEADERS en cada respuesta.
    """

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["path"].rstrip("/").endswith(RELAY_PATH_SUFFIXES):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)

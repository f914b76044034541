from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from restroom_relay.core import logger
from restroom_relay.core.cors import CORS_ALLOW_HEADERS_LIST, RelayAwareCORSMiddleware
from restroom_relay.core.discord_logger import send_discord_alert
from restroom_relay.database import Base, engine
from restroom_relay.routers import api_router
import restroom_relay.models  # noqa: F401  registra las tablas en Base.metadata


api_description = """
API para operar baños conectados (puerta, descarga y aromatizador).

Los comandos se envían por SMS (GSM) o por HTTP local (WiFi) según el modo
de control de cada baño. Cada intento queda registrado en `command_logs`.

## Relays

* `POST /api/v1/send-gsm-command`: registra el comando (sin gateway SMS real).
* `POST /api/v1/send-wifi-command`: llama al dispositivo con timeout de 5 s.
"""

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Iniciando API Restroom Relay...")
    Base.metadata.create_all(bind=engine)

    yield

    logger.info("🛑 Deteniendo servicios...")
    engine.dispose()


app = FastAPI(
    title="Restroom Relay API",
    description=api_description,
    version="1.0.0",
    lifespan=lifespan
)


# --- Middleware CORS (los relays manejan el suyo) ---
app.add_middleware(
    RelayAwareCORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS_LIST,
)


# --- Routers ---
app.include_router(api_router)


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "Bienvenido a la API de Restroom Relay v1"}


# --- Manejo global de errores ---
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    message = f"Error 500 en {request.url.path}: {exc}"
    logger.error(message)
    send_discord_alert(message, level="CRITICAL")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"}
    )

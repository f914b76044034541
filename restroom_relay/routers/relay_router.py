# restroom_relay/routers/relay_router.py

from fastapi import APIRouter, Depends, Header, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from restroom_relay.database import get_db
from restroom_relay.core import logger, log_critical_error, RelayError, CORS_HEADERS
from restroom_relay.services import GsmRelayService, WifiRelayService, CommandRelayService
from restroom_relay.schemas import RelaySuccessResponse, RelayErrorResponse

router = APIRouter(tags=["Command Relay"])

RELAY_RESPONSES = {
    400: {"model": RelayErrorResponse},
    401: {"model": RelayErrorResponse},
    403: {"model": RelayErrorResponse},
    500: {"model": RelayErrorResponse},
}


def relay_json_response(status_code: int, content: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


async def read_json_body(request: Request):
    """Body JSON o None si no se puede parsear; el validador decide qué responder."""
    try:
        return await request.json()
    except ValueError:
        return None


async def run_relay(relay_name: str, call, *args) -> JSONResponse:
    """
    Ejecuta el relay fuera del event loop (la llamada al dispositivo es bloqueante)
    y convierte el resultado al formato {success, ...}.
    """
    try:
        result = await run_in_threadpool(call, *args)
        return relay_json_response(status.HTTP_200_OK, result)
    except RelayError as e:
        return relay_json_response(e.status_code, {"success": False, "error": e.message})
    except Exception as e:
        logger.exception(f"Error en {relay_name}: {e}")
        log_critical_error(f"Error 500 en {relay_name}: {e}")
        return relay_json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"success": False, "error": "Internal server error"},
        )


async def _handle_relay(service: CommandRelayService, relay_name: str, request: Request, authorization: str | None) -> JSONResponse:
    payload = await read_json_body(request)
    return await run_relay(relay_name, service.send_command, payload, authorization)


@router.options("/send-gsm-command", include_in_schema=False)
@router.options("/send-wifi-command", include_in_schema=False)
async def relay_preflight_route():
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post("/send-gsm-command", response_model=RelaySuccessResponse, responses=RELAY_RESPONSES)
async def send_gsm_command_route(
    request: Request,
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db)
):
    """
    Registra un comando para un baño controlado por SMS.

    **Body:**
    ```json
    {
        "toiletId": "0b7c5f0e-3a51-4c0e-9a39-2d6f1b8a7c11",
        "command": "FLUSH",
        "phoneNumber": "+233201234567",
        "secretCode": "abc123"
    }
    ```

    No hay gateway SMS integrado: el comando queda en `command_logs` con estado
    `sent` y la respuesta incluye un `note` avisándolo.
    """
    return await _handle_relay(GsmRelayService(db), "send-gsm-command", request, authorization)


@router.post("/send-wifi-command", response_model=RelaySuccessResponse, responses=RELAY_RESPONSES)
async def send_wifi_command_route(
    request: Request,
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db)
):
    """
    Envía un comando a un baño por HTTP local.

    **Body:**
    ```json
    {
        "toiletId": "0b7c5f0e-3a51-4c0e-9a39-2d6f1b8a7c11",
        "command": "OPEN",
        "ipAddress": "192.168.1.50",
        "secretCode": "abc123"
    }
    ```

    Llama `GET http://<ipAddress>/<COMMAND>?code=<secretCode>` una sola vez con
    timeout de 5 segundos.

    **Errores posibles:**
    - 400: Formato inválido
    - 401: Sin token o token inválido
    - 403: Código secreto incorrecto
    - 500: El dispositivo no respondió o respondió con error
    """
    return await _handle_relay(WifiRelayService(db), "send-wifi-command", request, authorization)

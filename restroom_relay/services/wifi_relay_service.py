# restroom_relay/services/wifi_relay_service.py

from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from urllib.parse import quote

import requests
from fastapi import status
from restroom_relay.core import logger, settings, RelayError
from restroom_relay.models import ControlMode, CommandStatus
from .relay_service import CommandRelayService
from restroom_relay.core.command_validator import validate_wifi_request

# Hilos para las llamadas al dispositivo; permiten cortar la espera a los 5 s
_device_executor = ThreadPoolExecutor(max_workers=8, thread_name_prefix="device-call")

# Caracteres que encodeURIComponent deja sin codificar (además de alfanuméricos y -_.~)
URI_COMPONENT_SAFE = "!*'()"


def build_device_url(ip_address: str, command: str, secret_code: str) -> str:
    # El dispositivo solo habla HTTP plano; el código viaja como query param (?code=).
    # Se codifica igual que encodeURIComponent (espacio -> %20, no "+")
    return f"http://{ip_address}/{command}?code={quote(secret_code, safe=URI_COMPONENT_SAFE)}"


def _fetch(url: str, timeout: float, opened: list) -> requests.Response:
    response = requests.get(url, timeout=timeout, allow_redirects=False, stream=True)
    opened.append(response)
    # Lee el body completo dentro del plazo total
    response.content
    return response


class WifiRelayService(CommandRelayService):
    """
    Relay por HTTP local. Un solo intento contra el dispositivo con
    plazo total fijo; el resultado queda en el log como "success" o "failed".
    """

    control_mode = ControlMode.WIFI
    destination_field = "ipAddress"

    def validate(self, payload: dict) -> str | None:
        return validate_wifi_request(payload)

    def send_command(self, payload: dict, authorization: str | None) -> dict:
        principal = self._authorize(payload, authorization)
        ip_address = payload["ipAddress"]
        command = payload["command"]

        command_log = self._log_sent(payload)
        if command_log is None:
            logger.error(f"No se registró el comando WiFi para {ip_address}, se continúa")

        device_status, error_detail = self._dispatch(ip_address, command, payload["secretCode"])

        if error_detail is None:
            if command_log is not None:
                self.command_log_repo.update_command_status(command_log.id, CommandStatus.SUCCESS)

            logger.info(f"📤 {command} → {ip_address} (HTTP {device_status}, usuario {principal.user_id})")
            return {
                "success": True,
                "message": f"Command sent successfully to {ip_address}",
                "status": device_status,
            }

        if command_log is not None:
            self.command_log_repo.update_command_status(command_log.id, CommandStatus.FAILED, error_detail)

        logger.warning(f"❌ Falló {command} → {ip_address}: {error_detail}")
        raise RelayError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to send command to device")

    def _dispatch(self, ip_address: str, command: str, secret_code: str) -> tuple[int | None, str | None]:
        """
        Envía el comando al dispositivo con un plazo total de DEVICE_TIMEOUT_SECONDS
        (conexión + headers + body). Sin redirecciones ni reintentos.
        Devuelve (status_http, None) si respondió 2xx o (status_http | None, detalle_error).
        """
        timeout = settings.DEVICE_TIMEOUT_SECONDS
        timeout_detail = f"Device did not respond within {timeout:g} seconds"
        opened = []

        future = _device_executor.submit(_fetch, build_device_url(ip_address, command, secret_code), timeout, opened)
        try:
            response = future.result(timeout=timeout)
        except FutureTimeoutError:
            future.cancel()
            for response in opened:
                response.close()
            return None, timeout_detail
        except requests.Timeout:
            return None, timeout_detail
        except requests.RequestException as e:
            return None, str(e) or "Network error"

        if not 200 <= response.status_code < 300:
            return response.status_code, f"Device responded with HTTP {response.status_code} {response.reason or ''}".strip()

        return response.status_code, None

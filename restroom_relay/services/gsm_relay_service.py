# restroom_relay/services/gsm_relay_service.py

from restroom_relay.core import logger
from restroom_relay.models import ControlMode
from .relay_service import CommandRelayService
from restroom_relay.core.command_validator import validate_gsm_request

SMS_PROVIDER_NOTE = "SMS integration requires SMS provider API key"


class GsmRelayService(CommandRelayService):
    """
    Relay por SMS. No existe gateway SMS integrado: el comando solo
    queda registrado con estado "sent" y nunca se actualiza.
    """

    control_mode = ControlMode.GSM
    destination_field = "phoneNumber"

    def validate(self, payload: dict) -> str | None:
        return validate_gsm_request(payload)

    def send_command(self, payload: dict, authorization: str | None) -> dict:
        principal = self._authorize(payload, authorization)
        phone_number = payload["phoneNumber"]

        command_log = self._log_sent(payload)
        if command_log is None:
            logger.error(f"No se registró el comando GSM para {phone_number}, se continúa")

        logger.info(f"📨 Comando SMS {payload['command']} registrado para {phone_number} (usuario {principal.user_id})")

        return {
            "success": True,
            "message": f"Command sent via GSM to {phone_number}",
            "note": SMS_PROVIDER_NOTE,
        }

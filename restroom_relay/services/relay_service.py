# restroom_relay/services/relay_service.py

import hmac
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from fastapi import status
from restroom_relay.core import logger, RelayError, resolve_principal, TokenData
from restroom_relay.models import CommandLog, ControlMode
from restroom_relay.repositories import AdminSettingRepository, CommandLogRepository


class CommandRelayService:
    """
    Pasos comunes a los relays GSM y WiFi:
    validar -> autenticar -> verificar código secreto -> registrar "sent".
    Cada subclase define su validador, el campo destino y el transporte.
    """

    control_mode: ControlMode
    destination_field: str

    def __init__(self, db: Session):
        self.db = db
        self.setting_repo = AdminSettingRepository(db)
        self.command_log_repo = CommandLogRepository(db)

    def validate(self, payload: dict) -> str | None:
        raise NotImplementedError

    def send_command(self, payload: dict, authorization: str | None) -> dict:
        raise NotImplementedError

    def _authorize(self, payload: dict, authorization: str | None) -> TokenData:
        """Corre todos los chequeos previos a cualquier efecto secundario."""
        if not authorization:
            raise RelayError(status.HTTP_401_UNAUTHORIZED, "Missing authorization header")

        validation_error = self.validate(payload)
        if validation_error:
            raise RelayError(status.HTTP_400_BAD_REQUEST, validation_error)

        principal = resolve_principal(authorization)
        if principal is None:
            raise RelayError(status.HTTP_401_UNAUTHORIZED, "Unauthorized")

        if not self._secret_matches(payload["secretCode"]):
            logger.warning(f"⛔ Usuario {principal.user_id} envió un código secreto inválido")
            raise RelayError(status.HTTP_403_FORBIDDEN, "Invalid secret code")

        return principal

    def _secret_matches(self, secret_code: str) -> bool:
        try:
            stored = self.setting_repo.get_secret_code()
        except SQLAlchemyError as e:
            logger.error(f"Error leyendo el código secreto: {e}")
            return False

        if stored is None:
            logger.warning("No hay código secreto configurado en admin_settings")
            return False

        return hmac.compare_digest(stored.encode("utf-8"), secret_code.encode("utf-8"))

    def _log_sent(self, payload: dict) -> CommandLog | None:
        # Si falla el log seguimos: el registro es best-effort
        return self.command_log_repo.create_command_log(
            toilet_id=payload["toiletId"],
            command_type=payload["command"],
            control_mode=self.control_mode,
            destination=payload[self.destination_field],
        )

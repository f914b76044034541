# restroom_relay/services/toilet_service.py

from sqlalchemy.orm import Session
from fastapi import status
from restroom_relay.models import Toilet, ControlMode
from restroom_relay.repositories import ToiletRepository
from restroom_relay.schemas import ToiletCreate, ToiletUpdate, ToiletResponse
from restroom_relay.core import logger, RelayError, resolve_principal
from .gsm_relay_service import GsmRelayService
from .wifi_relay_service import WifiRelayService

def get_toilet_by_id_service(db: Session, toilet_id: str) -> ToiletResponse | None:
    toilet = ToiletRepository(db).get_toilet_by_id_repository(toilet_id)
    if toilet:
        return ToiletResponse.model_validate(toilet)
    return None

def get_all_toilets_service(db: Session) -> list[ToiletResponse]:
    toilets = ToiletRepository(db).get_all_toilets_repository()
    return [ToiletResponse.model_validate(toilet) for toilet in toilets]

def create_toilet_service(db: Session, toilet_data: ToiletCreate) -> ToiletResponse | None:
    toilet = ToiletRepository(db).create_toilet_repository(Toilet(**toilet_data.model_dump()))
    if toilet:
        return ToiletResponse.model_validate(toilet)
    return None

def update_toilet_service(db: Session, toilet_id: str, toilet_data: ToiletUpdate) -> ToiletResponse | None:
    toilet_repo = ToiletRepository(db)
    toilet = toilet_repo.get_toilet_by_id_repository(toilet_id)

    if not toilet:
        return None

    update_data = toilet_data.model_dump(exclude_unset=True)
    if not update_data:
        return ToiletResponse.model_validate(toilet)

    if update_data.get("status") is not None:
        update_data["status"] = update_data["status"].value

    updated_toilet = toilet_repo.update_toilet_repository(toilet_id, update_data)
    if updated_toilet:
        return ToiletResponse.model_validate(updated_toilet)
    return None


def send_toilet_command_service(db: Session, toilet_id: str, body, authorization: str | None) -> dict:
    """
    Despacha el comando por el relay que corresponde al control_mode del baño.
    El destino (número GSM o IP) se toma de la configuración del baño; el body
    crudo ({command, secretCode}) lo valida el propio relay.
    """
    if not authorization:
        raise RelayError(status.HTTP_401_UNAUTHORIZED, "Missing authorization header")

    # Antes de buscar el baño, para no revelar qué baños existen
    if resolve_principal(authorization) is None:
        raise RelayError(status.HTTP_401_UNAUTHORIZED, "Unauthorized")

    toilet_repo = ToiletRepository(db)
    toilet = toilet_repo.get_toilet_by_id_repository(toilet_id)
    if not toilet:
        raise RelayError(status.HTTP_404_NOT_FOUND, "Toilet not found")

    if not isinstance(body, dict):
        body = {}

    payload = {
        "toiletId": toilet.id,
        "command": body.get("command"),
        "secretCode": body.get("secretCode"),
    }

    if toilet.control_mode == ControlMode.GSM:
        if not toilet.gsm_number:
            raise RelayError(status.HTTP_400_BAD_REQUEST, "Toilet has no GSM number configured")
        payload["phoneNumber"] = toilet.gsm_number
        service = GsmRelayService(db)
    else:
        if not toilet.wifi_ip:
            raise RelayError(status.HTTP_400_BAD_REQUEST, "Toilet has no WiFi IP configured")
        payload["ipAddress"] = toilet.wifi_ip
        service = WifiRelayService(db)

    logger.info(f"Despachando {payload['command']} al baño {toilet.id} vía {toilet.control_mode.value}")
    result = service.send_command(payload, authorization)

    # Solo si el relay respondió éxito; si falla el update el comando ya se envió
    if toilet_repo.record_command_effect(toilet.id, payload["command"]) is None:
        logger.error(f"No se pudo actualizar el estado del baño {toilet.id} tras {payload['command']}")

    return result

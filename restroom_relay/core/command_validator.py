# restroom_relay/core/command_validator.py

import re
from typing import Any
from restroom_relay.models import CommandType

VALID_COMMANDS = [c.value for c in CommandType]

UUID_REGEX = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)
PHONE_NUMBER_REGEX = re.compile(r"\+?[1-9][0-9]{1,14}")
IP_ADDRESS_REGEX = re.compile(
    r"(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)

SECRET_CODE_MIN_LENGTH = 6
SECRET_CODE_MAX_LENGTH = 50


def _matches(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_phone_number(value: Any) -> bool:
    return _matches(PHONE_NUMBER_REGEX, value)


def is_valid_ip_address(value: Any) -> bool:
    return _matches(IP_ADDRESS_REGEX, value)


def _validate_request(payload: dict, destination_field: str, destination_check, destination_error: str) -> str | None:
    """
    Valida la forma del comando en orden; el primer error gana.
    Devuelve None si es válido o el mensaje del primer chequeo que falló.
    """
    if not isinstance(payload, dict):
        return "Invalid toilet ID format"

    if not _matches(UUID_REGEX, payload.get("toiletId")):
        return "Invalid toilet ID format"

    if payload.get("command") not in VALID_COMMANDS:
        return f"Invalid command. Must be one of: {', '.join(VALID_COMMANDS)}"

    if not destination_check(payload.get(destination_field)):
        return destination_error

    secret_code = payload.get("secretCode")
    if not isinstance(secret_code, str) or not (SECRET_CODE_MIN_LENGTH <= len(secret_code) <= SECRET_CODE_MAX_LENGTH):
        return "Invalid secret code format"

    return None


def validate_gsm_request(payload: dict) -> str | None:
    return _validate_request(payload, "phoneNumber", is_valid_phone_number, "Invalid phone number format")


def validate_wifi_request(payload: dict) -> str | None:
    return _validate_request(payload, "ipAddress", is_valid_ip_address, "Invalid IP address format")

# restroom_relay/schemas/toilet_schema.py

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator
from restroom_relay.models import ControlMode, ToiletStatus
from restroom_relay.core.command_validator import is_valid_phone_number, is_valid_ip_address


def _check_gsm_number(value: str | None) -> str | None:
    if value is not None and not is_valid_phone_number(value):
        raise ValueError("Invalid phone number format")
    return value

def _check_wifi_ip(value: str | None) -> str | None:
    if value is not None and not is_valid_ip_address(value):
        raise ValueError("Invalid IP address format")
    return value


class BaseToilet(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    location: str = Field(min_length=1, max_length=200)
    control_mode: ControlMode = ControlMode.WIFI
    gsm_number: str | None = None
    wifi_ip: str | None = None
    auto_door: bool | None = False
    auto_flush: bool | None = False
    perfume_enabled: bool | None = False
    perfume_interval: int | None = Field(default=30, ge=1, le=1440)

class ToiletCreate(BaseToilet):

    @field_validator("gsm_number")
    @classmethod
    def check_gsm_number(cls, value):
        return _check_gsm_number(value)

    @field_validator("wifi_ip")
    @classmethod
    def check_wifi_ip(cls, value):
        return _check_wifi_ip(value)

class ToiletUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    location: str | None = Field(default=None, min_length=1, max_length=200)
    status: ToiletStatus | None = None
    control_mode: ControlMode | None = None
    gsm_number: str | None = None
    wifi_ip: str | None = None
    auto_door: bool | None = None
    auto_flush: bool | None = None
    perfume_enabled: bool | None = None
    perfume_interval: int | None = Field(default=None, ge=1, le=1440)
    door_open: bool | None = None
    is_occupied: bool | None = None
    last_cleaned: datetime | None = None

    @field_validator("gsm_number")
    @classmethod
    def check_gsm_number(cls, value):
        return _check_gsm_number(value)

    @field_validator("wifi_ip")
    @classmethod
    def check_wifi_ip(cls, value):
        return _check_wifi_ip(value)

class ToiletResponse(BaseToilet):
    id: str
    status: str
    door_open: bool | None = None
    is_occupied: bool | None = None
    last_flushed: datetime | None = None
    last_cleaned: datetime | None = None
    last_perfumed: datetime | None = None
    model_config = ConfigDict(from_attributes=True)


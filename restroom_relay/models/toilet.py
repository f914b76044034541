# restroom_relay/models/toilet.py

import uuid
from datetime import datetime, timezone
from restroom_relay.database import Base
from sqlalchemy import Column, String, Integer, TIMESTAMP, Boolean, Enum
from .enums import ControlMode

def _utcnow():
    return datetime.now(timezone.utc)

class Toilet(Base):
    __tablename__ = "toilets"

    id =                Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name =              Column(String(100), nullable=False)
    location =          Column(String(200), nullable=False)
    status =            Column(String(20), nullable=False, default="available")
    control_mode =      Column(Enum(ControlMode, name="control_mode", values_callable=lambda e: [m.value for m in e]), nullable=False, default=ControlMode.WIFI)
    gsm_number =        Column(String(20), nullable=True)
    wifi_ip =           Column(String(15), nullable=True)
    door_open =         Column(Boolean, default=False)
    is_occupied =       Column(Boolean, default=False)
    auto_door =         Column(Boolean, default=False)
    auto_flush =        Column(Boolean, default=False)
    perfume_enabled =   Column(Boolean, default=False)
    perfume_interval =  Column(Integer, default=30)  # minutos
    last_flushed =      Column(TIMESTAMP(timezone=True), nullable=True)
    last_cleaned =      Column(TIMESTAMP(timezone=True), nullable=True)
    last_perfumed =     Column(TIMESTAMP(timezone=True), nullable=True)
    created_at =        Column(TIMESTAMP(timezone=True), default=_utcnow)
    updated_at =        Column(TIMESTAMP(timezone=True), default=_utcnow, onupdate=_utcnow)

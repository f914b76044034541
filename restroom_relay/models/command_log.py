# restroom_relay/models/command_log.py

import uuid
from datetime import datetime, timezone
from restroom_relay.database import Base
from sqlalchemy import Column, String, Text, TIMESTAMP, Enum
from sqlalchemy.orm import relationship
from .enums import ControlMode

class CommandLog(Base):
    __tablename__ = "command_logs"

    id =            Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # Referencia informativa sin FK: el log no depende de que el baño exista
    toilet_id =     Column(String(36), nullable=True, index=True)
    command_type =  Column(String(20), nullable=False)
    control_mode =  Column(Enum(ControlMode, name="control_mode", values_callable=lambda e: [m.value for m in e]), nullable=False)
    destination =   Column(String(100), nullable=False)
    status =        Column(String(20), nullable=False, default="sent")
    error_message = Column(Text, nullable=True)
    created_at =    Column(TIMESTAMP(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)

    toilet = relationship("Toilet", primaryjoin="foreign(CommandLog.toilet_id) == Toilet.id", viewonly=True)

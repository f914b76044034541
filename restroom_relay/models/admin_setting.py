import uuid
from datetime import datetime, timezone
from restroom_relay.database import Base
from sqlalchemy import Column, String, Text, TIMESTAMP

def _utcnow():
    return datetime.now(timezone.utc)

class AdminSetting(Base):
    __tablename__ = "admin_settings"

    id =            Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    setting_key =   Column(String(100), nullable=False, unique=True, index=True)
    setting_value = Column(Text, nullable=False)
    created_at =    Column(TIMESTAMP(timezone=True), default=_utcnow)
    updated_at =    Column(TIMESTAMP(timezone=True), default=_utcnow, onupdate=_utcnow)

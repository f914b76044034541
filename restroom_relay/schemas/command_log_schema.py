from datetime import datetime
from pydantic import BaseModel, ConfigDict
from restroom_relay.models import ControlMode

class CommandLogResponse(BaseModel):
    id: str
    toilet_id: str | None
    command_type: str
    control_mode: ControlMode
    destination: str
    status: str
    error_message: str | None = None
    created_at: datetime | None
    toilet_name: str | None = None
    toilet_location: str | None = None
    model_config = ConfigDict(from_attributes=True)

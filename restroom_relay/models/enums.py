# restroom_relay/models/enums.py

import enum

class CommandType(str, enum.Enum):
    FLUSH = "FLUSH"
    OPEN = "OPEN"
    CLOSE = "CLOSE"
    PERFUME = "PERFUME"

class ControlMode(str, enum.Enum):
    GSM = "gsm"
    WIFI = "wifi"

class CommandStatus(str, enum.Enum):
    SENT = "sent"
    SUCCESS = "success"
    FAILED = "failed"

class ToiletStatus(str, enum.Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"

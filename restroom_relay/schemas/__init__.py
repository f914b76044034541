# Relay Schemas
from .relay_schema import RelaySuccessResponse, RelayErrorResponse

# Setting Schemas
from .setting_schema import SecretCodeUpdate, SecretCodeResponse

# Command Log Schemas
from .command_log_schema import CommandLogResponse

# Toilet Schemas
from .toilet_schema import ToiletCreate, ToiletUpdate, ToiletResponse

from .enums import CommandType, ControlMode, CommandStatus, ToiletStatus
from .admin_setting import AdminSetting
from .toilet import Toilet
from .command_log import CommandLog

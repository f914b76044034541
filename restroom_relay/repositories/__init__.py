# restroom_relay/repositories/__init__.py

from .admin_setting_repository import AdminSettingRepository, SECRET_CODE_KEY
from .command_log_repository import CommandLogRepository
from .toilet_repository import ToiletRepository

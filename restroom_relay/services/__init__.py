# restroom_relay/services/__init__.py

# Relays
from .relay_service import CommandRelayService
from .gsm_relay_service import GsmRelayService
from .wifi_relay_service import WifiRelayService

# Settings Service
from .setting_service import get_secret_code_service, update_secret_code_service

# Command Log Service
from .command_log_service import get_recent_command_logs_service

# Toilet Service
from .toilet_service import (
    get_toilet_by_id_service,
    get_all_toilets_service,
    create_toilet_service,
    update_toilet_service,
    send_toilet_command_service
)

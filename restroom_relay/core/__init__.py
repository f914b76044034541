from .settings import settings
from .logger import logger, log_critical_error
from .security import create_token, get_current_user, get_current_admin, resolve_principal, TokenData
from .exceptions import RelayError
from .cors import CORS_HEADERS

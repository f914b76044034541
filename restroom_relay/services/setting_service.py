from sqlalchemy.orm import Session
from restroom_relay.repositories import AdminSettingRepository, SECRET_CODE_KEY
from restroom_relay.schemas import SecretCodeUpdate, SecretCodeResponse
from restroom_relay.core import logger

def get_secret_code_service(db: Session) -> SecretCodeResponse | None:
    setting = AdminSettingRepository(db).get_setting(SECRET_CODE_KEY)
    if not setting:
        return None
    return SecretCodeResponse(secret_code=setting.setting_value, updated_at=setting.updated_at)

def update_secret_code_service(db: Session, user_id: str, data: SecretCodeUpdate) -> SecretCodeResponse | None:
    setting = AdminSettingRepository(db).set_secret_code(data.secret_code)
    if not setting:
        return None
    logger.info(f"🔑 Código secreto rotado por el administrador {user_id}")
    return SecretCodeResponse(secret_code=setting.setting_value, updated_at=setting.updated_at)

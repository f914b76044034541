from sqlalchemy.orm import Session
from restroom_relay.models import AdminSetting
from restroom_relay.core import logger

SECRET_CODE_KEY = "secret_code"

class AdminSettingRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_setting(self, key: str) -> AdminSetting | None:
        return self.db.query(AdminSetting).filter(AdminSetting.setting_key == key).first()

    def get_secret_code(self) -> str | None:
        setting = self.get_setting(SECRET_CODE_KEY)
        return setting.setting_value if setting else None

    def set_secret_code(self, value: str) -> AdminSetting | None:
        """Actualiza el código secreto global; si no existe la fila la crea."""
        try:
            setting = self.get_setting(SECRET_CODE_KEY)

            if setting:
                setting.setting_value = value
            else:
                setting = AdminSetting(setting_key=SECRET_CODE_KEY, setting_value=value)
                self.db.add(setting)

            self.db.commit()
            self.db.refresh(setting)
            logger.info("Código secreto actualizado")
            return setting
        except Exception as e:
            logger.error(f"No se pudo actualizar el código secreto: {e}")
            self.db.rollback()
            return None

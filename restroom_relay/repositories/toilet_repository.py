from datetime import datetime, timezone
from restroom_relay.models import Toilet, CommandType
from sqlalchemy.orm import Session

from restroom_relay.core import logger

class ToiletRepository:

    def __init__(self, db: Session):
        self.db = db


    def get_toilet_by_id_repository(self, toilet_id: str) -> Toilet | None:
        return self.db.query(Toilet).filter(Toilet.id == toilet_id).first()

    def get_all_toilets_repository(self) -> list[Toilet]:
        return self.db.query(Toilet).order_by(Toilet.name).all()


    def create_toilet_repository(self, new_toilet: Toilet) -> Toilet | None:

        try:
            self.db.add(new_toilet)
            self.db.commit()
            self.db.refresh(new_toilet)
            logger.info(f"Baño {new_toilet.id} creado exitosamente")
            return new_toilet
        except Exception as e:
            logger.error(f"No se pudo agregar el baño: {e}")
            self.db.rollback()
            return None


    def update_toilet_repository(self, toilet_id: str, update_data: dict) -> Toilet | None:

        try:
            toilet = self.get_toilet_by_id_repository(toilet_id)

            if not toilet:
                logger.info(f"No se encontro baño con id {toilet_id}")
                return None

            for key, value in update_data.items():
                setattr(toilet, key, value)

            self.db.commit()
            self.db.refresh(toilet)
            return toilet
        except Exception as e:
            logger.error(f"No se pudo actualizar el baño con id {toilet_id}: {e}")
            self.db.rollback()
            return None


    def record_command_effect(self, toilet_id: str, command: str) -> Toilet | None:
        """Refleja en el baño el efecto de un comando enviado con éxito."""
        now = datetime.now(timezone.utc)
        effects = {
            CommandType.FLUSH.value: {"last_flushed": now},
            CommandType.PERFUME.value: {"last_perfumed": now},
            CommandType.OPEN.value: {"door_open": True},
            CommandType.CLOSE.value: {"door_open": False},
        }
        return self.update_toilet_repository(toilet_id, effects[command])

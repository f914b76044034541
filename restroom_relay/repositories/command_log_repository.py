from sqlalchemy.orm import Session, joinedload
from restroom_relay.models import CommandLog, CommandStatus, ControlMode
from restroom_relay.core import logger

class CommandLogRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_command_log_by_id(self, log_id: str) -> CommandLog | None:
        return self.db.query(CommandLog).filter(CommandLog.id == log_id).first()

    def create_command_log(self, toilet_id: str, command_type: str, control_mode: ControlMode, destination: str) -> CommandLog | None:
        try:
            new_log = CommandLog(
                toilet_id=toilet_id,
                command_type=command_type,
                control_mode=control_mode,
                destination=destination,
                status=CommandStatus.SENT.value,
            )
            self.db.add(new_log)
            self.db.commit()
            self.db.refresh(new_log)
            return new_log
        except Exception as e:
            logger.error(f"Error creando el log del comando: {e}")
            self.db.rollback()
            return None

    def update_command_status(self, log_id: str, status: CommandStatus, error_message: str | None = None) -> CommandLog | None:
        try:
            command_log = self.get_command_log_by_id(log_id)

            if not command_log:
                logger.info(f"No se encontró log de comando con id {log_id}")
                return None

            command_log.status = status.value
            command_log.error_message = error_message
            self.db.commit()
            self.db.refresh(command_log)
            return command_log
        except Exception as e:
            logger.error(f"No se pudo actualizar el log de comando {log_id}: {e}")
            self.db.rollback()
            return None

    def get_recent_command_logs(self, limit: int = 50) -> list[CommandLog]:
        return (
            self.db.query(CommandLog)
            .options(joinedload(CommandLog.toilet))
            .order_by(CommandLog.created_at.desc())
            .limit(limit)
            .all()
        )

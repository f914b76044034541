from sqlalchemy.orm import Session
from restroom_relay.repositories import CommandLogRepository
from restroom_relay.schemas import CommandLogResponse

def get_recent_command_logs_service(db: Session, limit: int = 50) -> list[CommandLogResponse]:
    """Últimos comandos, del más reciente al más antiguo, con nombre y ubicación del baño."""
    logs = CommandLogRepository(db).get_recent_command_logs(limit)
    result = []
    for command_log in logs:
        response = CommandLogResponse.model_validate(command_log)
        if command_log.toilet:
            response.toilet_name = command_log.toilet.name
            response.toilet_location = command_log.toilet.location
        result.append(response)
    return result

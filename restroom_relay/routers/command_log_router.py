from typing import List
from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, Query

from restroom_relay.database import get_db
from restroom_relay.core import TokenData, get_current_user
from restroom_relay.schemas import CommandLogResponse
from restroom_relay.services import get_recent_command_logs_service

router = APIRouter(prefix="/command-logs", tags=["Command Logs"])

@router.get("/", response_model=List[CommandLogResponse])
def get_command_logs_route(
    limit: int = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_user)
):
    return get_recent_command_logs_service(db, limit=limit)

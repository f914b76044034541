# restroom_relay/routers/toilet_router.py

from typing import List
from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from restroom_relay.database import get_db
from restroom_relay.core import TokenData, get_current_user, get_current_admin
from restroom_relay.schemas import ToiletCreate, ToiletUpdate, ToiletResponse, RelaySuccessResponse
from restroom_relay.services import (
    create_toilet_service,
    get_all_toilets_service,
    get_toilet_by_id_service,
    update_toilet_service,
    send_toilet_command_service
)
from .relay_router import run_relay, read_json_body, RELAY_RESPONSES

router = APIRouter(prefix="/toilets", tags=["Toilets"])

@router.post("/", response_model=ToiletResponse, status_code=status.HTTP_201_CREATED)
def create_toilet_route(toilet_data: ToiletCreate, db: Session = Depends(get_db), current_admin: TokenData = Depends(get_current_admin)):
    toilet = create_toilet_service(db, toilet_data=toilet_data)
    if not toilet:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No se pudo registrar el baño.")
    return toilet

@router.get("/", response_model=List[ToiletResponse])
def get_all_toilets_route(db: Session = Depends(get_db), current_user: TokenData = Depends(get_current_user)):
    return get_all_toilets_service(db)

@router.get("/{toilet_id}", response_model=ToiletResponse)
def get_toilet_by_id_route(toilet_id: str, db: Session = Depends(get_db), current_user: TokenData = Depends(get_current_user)):
    toilet = get_toilet_by_id_service(db, toilet_id=toilet_id)
    if not toilet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Baño no encontrado.")
    return toilet

@router.patch("/{toilet_id}", response_model=ToiletResponse)
def update_toilet_route(toilet_id: str, toilet_data: ToiletUpdate, db: Session = Depends(get_db), current_admin: TokenData = Depends(get_current_admin)):
    toilet = update_toilet_service(db, toilet_id=toilet_id, toilet_data=toilet_data)
    if not toilet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Baño no encontrado o no se pudo actualizar.")
    return toilet

@router.post("/{toilet_id}/commands", response_model=RelaySuccessResponse, responses={404: {}, **RELAY_RESPONSES})
async def send_toilet_command_route(
    toilet_id: str,
    request: Request,
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db)
):
    """
    Envía un comando al baño usando su modo de control configurado (GSM o WiFi).
    Body: `{"command": "FLUSH", "secretCode": "abc123"}`. Responde exactamente lo
    mismo que el relay correspondiente, incluidos sus errores 400.
    """
    body = await read_json_body(request)
    return await run_relay("toilet-command", send_toilet_command_service, db, toilet_id, body, authorization)

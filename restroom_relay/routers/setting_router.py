from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, HTTPException, status

from restroom_relay.database import get_db
from restroom_relay.core import TokenData, get_current_admin
from restroom_relay.schemas import SecretCodeUpdate, SecretCodeResponse
from restroom_relay.services import get_secret_code_service, update_secret_code_service

router = APIRouter(prefix="/settings", tags=["Settings"])

@router.get("/secret-code", response_model=SecretCodeResponse)
def get_secret_code_route(db: Session = Depends(get_db), current_admin: TokenData = Depends(get_current_admin)):
    secret = get_secret_code_service(db)
    if not secret:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No hay código secreto configurado.")
    return secret

@router.put("/secret-code", response_model=SecretCodeResponse)
def update_secret_code_route(data: SecretCodeUpdate, db: Session = Depends(get_db), current_admin: TokenData = Depends(get_current_admin)):
    secret = update_secret_code_service(db, user_id=current_admin.user_id, data=data)
    if not secret:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="No se pudo actualizar el código secreto.")
    return secret

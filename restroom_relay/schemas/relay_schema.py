from pydantic import BaseModel

class RelaySuccessResponse(BaseModel):
    """Respuesta 200 de los relays"""
    success: bool = True
    message: str
    note: str | None = None
    status: int | None = None

class RelayErrorResponse(BaseModel):
    """Respuesta de error de los relays (400/401/403/500)"""
    success: bool = False
    error: str

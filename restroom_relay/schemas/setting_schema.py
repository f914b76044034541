from datetime import datetime
from pydantic import BaseModel, Field

class SecretCodeUpdate(BaseModel):
    secret_code: str = Field(min_length=6, max_length=50)

class SecretCodeResponse(BaseModel):
    secret_code: str
    updated_at: datetime | None = None

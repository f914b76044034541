from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    URL_DATABASE_SQL: str
    KEY_SECRET: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    DEVICE_TIMEOUT_SECONDS: float = 5.0
    DISCORD_WEBHOOK_URL: str = ""
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = ""
    CORS_ALLOW_HEADERS: str = "authorization, x-client-info, apikey, content-type"


    model_config = {"env_file": ".env"}


settings = Settings()

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Booking Intake Service"
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    PORT_RETRY_ATTEMPTS: int = 10
    ENVIRONMENT: str = "development"

    # Built client (served in production only)
    CLIENT_DIST_DIR: str = "dist/public"

    # Logging
    LOG_LEVEL: str = "INFO"
    ERROR_LOG_FILE: str = "logs/errors.log"
    REQUEST_LOG_MAX_LENGTH: int = 80

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 3001
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    MAX_REQUEST_BODY_BYTES: int = 20 * 1024 * 1024

    COSMOS_DB_ENDPOINT: str = ""
    COSMOS_DB_KEY: str = ""
    COSMOS_DB_DATABASE: str = "employee-portal"
    COSMOS_DB_EMPLOYEES_CONTAINER: str = "employees"

    STORAGE_BUCKET: str = ""
    STORAGE_REGION: str = "us-east-1"
    STORAGE_ENDPOINT_URL: str = ""
    STORAGE_ACCESS_KEY: str = ""
    STORAGE_SECRET_KEY: str = ""
    STORAGE_PUBLIC_BASE_URL: str = ""
    STORAGE_IMAGE_PREFIX: str = "images"

    FIREBASE_API_KEY: str = ""
    FIREBASE_AUTH_ENDPOINT: str = "https://identitytoolkit.googleapis.com/v1"

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()

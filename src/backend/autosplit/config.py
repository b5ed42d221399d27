from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # App
    APP_NAME: str = "AutoSplit"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # OCR
    TESSERACT_CMD: str = "/usr/local/bin/tesseract"  # macOS default
    OCR_LANGUAGES: str = "eng+fra+deu+spa+ita+por+nld"
    OCR_CONFIG: str = r"--oem 3 --psm 6"

    # Uploads
    MAX_UPLOAD_MB: int = 10

    # Split
    DEFAULT_AMOUNT: float = 50.0

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATA_DIR: str = "data"
    STORAGE_KEY: str = "ff_tourney_v1"  # Snapshot is stored as <DATA_DIR>/<STORAGE_KEY>.json
    PERSIST_SESSION: bool = True  # Write the logged-in user into the snapshot file
    LOCALE: str = "bn"  # "bn" or "en"; selects the result message catalogue
    PASSWORD_SCHEMES: List[str] = ["pbkdf2_sha256"]
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    class Config:
        env_file = ".env"

settings = Settings()

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings

MEET_CREATE_SCOPE = "https://www.googleapis.com/auth/meetings.space.created"


class Settings(BaseSettings):
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_debug: bool = False
    cors_origins: List[str] = ["http://localhost:5173"]
    log_level: str = "INFO"

    # Both paths are resolved against the process working directory.
    token_path: Path = Path("token.json")
    credentials_path: Path = Path("credentials.json")
    meet_scopes: List[str] = [MEET_CREATE_SCOPE]
    oauth_redirect_port: int = 0

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",") if item.strip()]
            default_value = cls.model_fields["cors_origins"].default  # type: ignore[index]
            return items or default_value
        return value

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """애플리케이션 전체 설정. .env 파일 또는 UPSTREAM_GUARD_* 환경변수에서 로드."""

    model_config = SettingsConfigDict(
        env_prefix="UPSTREAM_GUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Third-party upstream
    third_party_base_url: str = "http://localhost:8081"
    third_party_name: str = "third_party_api"
    request_timeout: float = Field(default=10.0, gt=0)

    # 로깅
    log_level: str = "INFO"

    # API 서버
    host: str = "127.0.0.1"
    port: int = 8080

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value}")
        return name

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

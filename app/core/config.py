from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_name: str = Field(default="MCP Weather Server")
    env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    cors_allow_origins: str = Field(default="*")

    # National Weather Service upstream
    nws_base_url: str = Field(default="https://api.weather.gov")
    nws_user_agent: str = Field(default="weather-app/1.0")
    nws_accept: str = Field(default="application/geo+json")

    # None = wait on upstream indefinitely
    http_timeout_seconds: Optional[float] = Field(default=None)

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

settings = Settings()

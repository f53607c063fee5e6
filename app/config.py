from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Pydantic Settings v2 automatically reads from environment variables
    # OPENAI_API_KEY / GEMINI_API_KEY will be read automatically (case-insensitive)
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"

    fetch_timeout_seconds: float = 15.0
    provider_timeout_seconds: float = 30.0
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def gemini_configured(self) -> bool:
        return len(self.gemini_api_key) > 10

    @property
    def openai_configured(self) -> bool:
        return self.openai_api_key.startswith("sk-")

    @property
    def provider_configured(self) -> bool:
        return self.gemini_configured or self.openai_configured


settings = Settings()

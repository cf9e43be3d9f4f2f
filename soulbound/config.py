"""Plugin configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Plugin settings.

    Values are loaded from environment variables first,
    then from a .env file in the working directory as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"

    # Command surface
    SOULBOUND_COMMAND: str = "soulbound"
    SOULBOUND_PERMISSION: str = "soulbound.cando"

    # Render legacy chat colour codes in player notices
    CHAT_COLORS: bool = True


settings = Settings()

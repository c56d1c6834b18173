from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotifierSettings(BaseSettings):
    """Rocket.Chat notifier settings. Read from the process environment only."""

    webhook_url: str = Field(default="", alias="ROCKETCHAT_WEBHOOK_URL", repr=False)
    log_level: str = Field(default="WARNING", alias="ROCKETCHAT_NOTIFIER_LOG_LEVEL")

    model_config = SettingsConfigDict(extra="ignore")

    @property
    def has_webhook(self) -> bool:
        return bool(self.webhook_url.strip())


@lru_cache(maxsize=1)
def get_settings() -> NotifierSettings:
    return NotifierSettings()

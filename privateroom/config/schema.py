"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from privateroom.rooms.registry import DEFAULT_CAPACITY, DEFAULT_PRIVATE, DEFAULT_ROOM_NAME


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TelegramConfig(Base):
    """Telegram feed configuration."""
    token: str = ""  # Bot token from @BotFather
    api_base: str = "https://api.telegram.org"
    poll_interval: float = 3.0  # Seconds between getUpdates calls
    long_poll_timeout: int = 0  # getUpdates "timeout"; 0 = short polling
    request_timeout: float = 10.0  # Per-request timeout in seconds
    allow_from: list[str] = Field(default_factory=list)  # Allowed chat ids or usernames
    proxy: str | None = None  # HTTP/SOCKS5 proxy URL


class RoomsConfig(Base):
    """Room defaults applied by /create."""
    default_name: str = DEFAULT_ROOM_NAME
    default_capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    max_capacity: int | None = None  # Largest limit /create accepts; None = unbounded
    default_private: bool = DEFAULT_PRIVATE
    reply_seed: int | None = None  # Seed for canned lobby replies

    @model_validator(mode="after")
    def _default_within_max(self) -> "RoomsConfig":
        if self.max_capacity is not None and self.default_capacity > self.max_capacity:
            raise ValueError(
                f"defaultCapacity ({self.default_capacity}) exceeds maxCapacity ({self.max_capacity})"
            )
        return self


class LoggingConfig(Base):
    """Log sink configuration."""
    level: str = "INFO"  # Console level; the file always gets DEBUG
    file: str = "~/.privateroom/privateroom.log"
    rotation: str = "10 MB"
    retention: str = "1 week"

    @property
    def file_path(self) -> Path:
        return Path(self.file).expanduser()


class Config(BaseSettings):
    """Root configuration for privateroom."""
    telegram: TelegramConfig = Field(default_factory=TelegramConfig)
    rooms: RoomsConfig = Field(default_factory=RoomsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="PRIVATEROOM_",
        env_nested_delimiter="__",
    )

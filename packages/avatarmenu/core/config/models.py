"""Configuration models for avatarmenu."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from avatarmenu.core.osc.target import DEFAULT_HOST, DEFAULT_PORT
from avatarmenu.core.osc.udp import DEFAULT_ADDRESS_PREFIX


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class OscConfig(BaseModel):
    """Where parameter changes are sent."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, gt=0, lt=65536)
    address_prefix: str = Field(
        default=DEFAULT_ADDRESS_PREFIX,
        pattern="^/.*/$",
        description="OSC address prefix prepended to each parameter name",
    )

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    osc: OscConfig = OscConfig()
    vrchat_root: str | None = Field(
        default=None,
        description=(
            "VRChat data directory holding OSC/ and LocalAvatarData/. "
            "Derived from the avatar config path when unset."
        ),
    )

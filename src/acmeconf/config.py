"""
Configuration using Pydantic Settings.

The configuration directory comes from the ACME_CONFIG environment variable
or defaults to ~/.config/acme. Stores never read it from global state; callers
pass `AcmeConfig.config_dir` (or an override) explicitly.
"""

from pathlib import Path
from typing import Literal, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Account record file name inside the config dir
ACCOUNT_FILE = "account.json"
# Account private key file name inside the config dir
ACCOUNT_KEY_FILE = "account.key"


def default_config_dir() -> Path:
    """Per-user default config dir, or the working dir when home is unknown."""
    try:
        return Path.home() / ".config" / "acme"
    except RuntimeError:
        return Path(".")


def same_dir(existing: Union[str, Path], filename: str) -> Path:
    """Return `filename` placed in the same directory as `existing`."""
    return Path(existing).parent / filename


class AcmeConfig(BaseSettings):
    """Local ACME client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ACME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
        frozen=True,
    )

    config_dir: Path = Field(
        default_factory=default_config_dir,
        validation_alias="ACME_CONFIG",
        description="Directory holding account.json and account.key",
    )
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info",
        description="Log level for the CLI",
    )

    @field_validator("config_dir", mode="after")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def account_path(self) -> Path:
        """Path of the account record file."""
        return self.config_dir / ACCOUNT_FILE

    @property
    def key_path(self) -> Path:
        """Path of the account private key file."""
        return same_dir(self.account_path, ACCOUNT_KEY_FILE)

    def with_override(self, config_dir: Union[str, Path, None]) -> "AcmeConfig":
        """
        Return a copy pointing at another config directory.

        Args:
            config_dir: Explicit directory, e.g. from a command flag.
                None keeps the resolved one.

        Returns:
            New configuration value
        """
        if config_dir is None:
            return self
        return self.model_copy(update={"config_dir": Path(config_dir).expanduser()})


__all__ = [
    "AcmeConfig",
    "ACCOUNT_FILE",
    "ACCOUNT_KEY_FILE",
    "default_config_dir",
    "same_dir",
]

"""
formsurf configuration using pydantic-settings.

All settings can be set via environment variables with FORMSURF_ prefix,
or via Docker secrets in /run/secrets directory.
"""

from importlib.metadata import version

from anystore.settings import BaseSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict

try:
    VERSION = version("formsurf")
except Exception:
    VERSION = "0.0.0"


class Settings(BaseSettings):
    """
    formsurf configuration using pydantic-settings.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables with FORMSURF_ prefix
    2. .env file
    3. Docker secrets in /run/secrets directory
    """

    model_config = SettingsConfigDict(
        env_prefix="formsurf_",
        env_nested_delimiter="__",
        env_file=".env",
        secrets_dir="/run/secrets",
        extra="ignore",
    )

    debug: bool = Field(default=False)

    # HTTP submission
    http_timeout: float = Field(default=30.0)
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows; U; Windows NT 6.0; en-US; rv:1.1) "
        f"formsurf/{VERSION}"
    )

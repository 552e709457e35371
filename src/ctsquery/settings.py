"""Settings for ctsquery."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class CtsQuerySettings(BaseSettings):
    """ctsquery configuration settings."""

    LOG_LEVEL: str = "INFO"

    # What to do with a query carrying skip > 0 and limit == 0.
    # "ignore" renders no pagination subscript, "error" raises InvalidArgument.
    SKIP_WITHOUT_LIMIT: Literal["ignore", "error"] = "ignore"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = CtsQuerySettings()

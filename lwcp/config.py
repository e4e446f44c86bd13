from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class LwcpSettings(BaseSettings):
    # Raise LwcpSyntaxError from parse() instead of returning None
    strict: bool = Field(False, validation_alias="LWCP_STRICT")

    log_ring_size: int = Field(200, validation_alias="LWCP_LOG_RING_SIZE")
    log_level: str = Field("INFO", validation_alias="LWCP_LOG_LEVEL")
    log_propagate: bool = Field(True, validation_alias="LWCP_LOG_PROPAGATE")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> LwcpSettings:
    return LwcpSettings()

from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from vqueue_client.domain.value_objects.enums import Resort


class Settings(BaseSettings):
    VQ_RESORT: Resort = Resort.WDW
    VQ_ORIGIN: str | None = None
    VQ_ACCESS_TOKEN: str = ""

    HTTP_TIMEOUT: float = 30.0

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()

import os
from typing import Literal

from pydantic import BaseModel, Field


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    LOG_LEVEL: LogLevel = "INFO"
    LOG_RESULTS: bool = Field(
        True, description="Whether with_log also reports return values at DEBUG."
    )
    MEMO_MAXSIZE: int | None = Field(
        128, ge=1, description="Default lru_cache size used by memoize."
    )

    @classmethod
    def load(cls) -> "Settings":
        values: dict[str, object] = {}

        level = os.getenv("PUREFN_LOG_LEVEL") or os.getenv("LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level.upper()

        log_results = os.getenv("PUREFN_LOG_RESULTS")
        if log_results is not None:
            values["LOG_RESULTS"] = log_results

        maxsize = os.getenv("PUREFN_MEMO_MAXSIZE")
        if maxsize is not None:
            values["MEMO_MAXSIZE"] = None if maxsize.lower() == "none" else maxsize

        return cls(**values)


settings = Settings.load()

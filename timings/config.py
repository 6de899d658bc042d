from __future__ import annotations
from pydantic import BaseModel, field_validator

from .units import TimeUnit

class TimingConfig(BaseModel):
    default_unit: TimeUnit = TimeUnit.NANOSECONDS
    cli_prefix: str = "[timings]"

    @field_validator("default_unit", mode="before")
    @classmethod
    def _parse_unit(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return TimeUnit(value)
        return TimeUnit.parse(value)

TIMING_CONFIG = TimingConfig()

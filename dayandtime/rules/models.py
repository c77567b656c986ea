from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dayandtime.domain.interval import (
    DISTANT_FUTURE,
    DISTANT_PAST,
    ClosedInterval,
    ensure_utc,
)


class TermRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start: datetime | None = None
    end: datetime | None = None

    @field_validator("start", "end")
    @classmethod
    def _to_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value) if value is not None else None

    @model_validator(mode="after")
    def _ordered(self) -> TermRules:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError("term.start must not be after term.end")
        return self

    @property
    def is_bounded(self) -> bool:
        return self.start is not None or self.end is not None

    def to_interval(self) -> ClosedInterval[datetime]:
        return ClosedInterval(self.start or DISTANT_PAST, self.end or DISTANT_FUTURE)


class CursorRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    timezone: str | None = None  # None: host local zone
    now_margin_seconds: float = Field(default=5.0, gt=0)
    showing_time: bool = False
    term: TermRules = Field(default_factory=TermRules)

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {value!r}") from e
        return value


class Rules(BaseModel):
    cursor: CursorRules = Field(default_factory=CursorRules)

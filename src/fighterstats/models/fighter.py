"""Canonical fighter models shared across ingestion and feature layers."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


DATE_OF_BIRTH_FORMAT = "%Y-%m-%d"


class Stance(str, Enum):
    ORTHODOX = "Orthodox"
    SOUTHPAW = "Southpaw"
    SWITCH = "Switch"


class WeightClass(str, Enum):
    FLYWEIGHT = "flyweight"
    BANTAMWEIGHT = "bantamweight"
    FEATHERWEIGHT = "featherweight"
    LIGHTWEIGHT = "lightweight"
    WELTERWEIGHT = "welterweight"
    MIDDLEWEIGHT = "middleweight"
    LIGHT_HEAVYWEIGHT = "light_heavyweight"
    HEAVYWEIGHT = "heavyweight"


_OPTIONAL_FIELDS = (
    "nickname",
    "height_cm",
    "weight_in_kg",
    "reach_in_cm",
    "significant_strikes_landed_per_minute",
    "significant_striking_accuracy",
    "significant_strikes_absorbed_per_minute",
    "significant_strike_defence",
    "average_takedowns_landed_per_15_minutes",
    "takedown_accuracy",
    "takedown_defense",
    "average_submissions_attempted_per_15_minutes",
)


class RawRecord(BaseModel):
    """One fighter row as read from the statistics CSV, field-for-field typed."""

    name: str
    nickname: Optional[str] = None
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    draws: int = Field(..., ge=0)
    height_cm: float | None = None
    weight_in_kg: float | None = None
    reach_in_cm: float | None = None
    stance: str
    date_of_birth: date
    significant_strikes_landed_per_minute: float | None = None
    significant_striking_accuracy: float | None = None
    significant_strikes_absorbed_per_minute: float | None = None
    significant_strike_defence: float | None = None
    average_takedowns_landed_per_15_minutes: float | None = None
    takedown_accuracy: float | None = None
    takedown_defense: float | None = None
    average_submissions_attempted_per_15_minutes: float | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator(*_OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("wins", "losses", "draws", mode="before")
    @classmethod
    def _parse_counter(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not (value.isascii() and value.isdigit()):
                raise ValueError(f"expected a non-negative integer, got {value!r}")
            return int(value)
        return value

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def _parse_date_of_birth(cls, value: Any) -> Any:
        # Only the fixed YYYY-MM-DD layout is accepted; pydantic's lax date
        # parsing would also take timestamps.
        if isinstance(value, str):
            return datetime.strptime(value, DATE_OF_BIRTH_FORMAT).date()
        return value


class CleanRecord(BaseModel):
    """Fighter that passed validity filtering, carrying engineered features."""

    name: str
    stance: Stance
    is_orthodox: float
    is_southpaw: float
    is_switch: float
    weight_class: WeightClass
    weight_height_ratio: float
    reach_height_ratio: float
    submission_per_takedown: float
    age: float
    significant_strikes_lpm: float
    strike_diff: float
    takedown_lpm: float
    submission_lpm: float
    takedown_accuracy: float
    takedown_defense: float
    win_rate: float = Field(..., ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)

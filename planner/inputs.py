"""
Runner Inputs: Parsing and validation of the four host fields.

The host supplies weekly mileage, training phase, 5K time ("MM:SS") and
training days as loosely typed values. Everything is validated here,
before any pace or mileage is computed, and collected into a PlanRequest.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union
import math

from .errors import InputFormatError, InputRangeError


SUPPORTED_TRAINING_DAYS = (5, 6, 7)


class TrainingPhase(Enum):
    """Training phase classification."""
    BASE = "BASE"           # Easy volume, controlled fartlek
    STRENGTH = "STRENGTH"   # Threshold and tempo volume
    PEAK = "PEAK"           # Race pace intervals, highest volume
    TAPER = "TAPER"         # Pre-race reduction (~40%)


@dataclass(frozen=True)
class RaceTime:
    """
    A 5K race effort.

    total_seconds is positive and finite once constructed via parse_race_time.
    """
    minutes: float
    seconds: float

    @property
    def total_seconds(self) -> float:
        return self.minutes * 60 + self.seconds

    def __str__(self) -> str:
        return f"{self.minutes:g}:{self.seconds:02g}"


def _parse_component(text: str, raw: str) -> float:
    text = text.strip()
    if not text:
        raise InputFormatError(f"5K time '{raw}' must be in MM:SS format")
    try:
        value = float(text)
    except ValueError:
        raise InputFormatError(f"5K time '{raw}' must be in MM:SS format") from None
    if not math.isfinite(value):
        raise InputFormatError(f"5K time '{raw}' must be in MM:SS format")
    return value


def parse_race_time(raw: str) -> RaceTime:
    """
    Parse a 5K time entered as "MM:SS".

    Args:
        raw: Text such as "20:00" or "19:45"

    Returns:
        RaceTime with a positive total

    Raises:
        InputFormatError: Not exactly two numeric components
        InputRangeError: Negative component or non-positive total
    """
    if not isinstance(raw, str):
        raise InputFormatError(f"5K time must be text in MM:SS format, got {raw!r}")

    parts = raw.split(':')
    if len(parts) != 2:
        raise InputFormatError(f"5K time '{raw}' must be in MM:SS format")

    minutes = _parse_component(parts[0], raw)
    seconds = _parse_component(parts[1], raw)

    if minutes < 0 or seconds < 0:
        raise InputRangeError(f"5K time '{raw}' cannot have negative components")

    race_time = RaceTime(minutes=minutes, seconds=seconds)
    if race_time.total_seconds <= 0:
        raise InputRangeError("Please enter a realistic 5K time")
    return race_time


def parse_weekly_mileage(raw: Union[str, float, int]) -> float:
    """
    Parse target weekly mileage.

    Non-numeric, NaN, infinite, zero or negative values are all range
    failures: the field is numeric in the host form.
    """
    if isinstance(raw, bool):
        raise InputRangeError(f"Weekly mileage must be a number, got {raw!r}")
    try:
        mileage = float(raw)
    except (TypeError, ValueError):
        raise InputRangeError(f"Weekly mileage must be a number, got {raw!r}") from None

    if not math.isfinite(mileage) or mileage <= 0:
        raise InputRangeError(f"Weekly mileage must be positive, got {raw!r}")
    return mileage


def parse_training_phase(raw: Union[str, TrainingPhase]) -> TrainingPhase:
    """Parse a phase name (case-insensitive)."""
    if isinstance(raw, TrainingPhase):
        return raw
    try:
        return TrainingPhase(str(raw).strip().upper())
    except ValueError:
        names = ", ".join(p.value for p in TrainingPhase)
        raise InputRangeError(f"Training phase must be one of {names}, got {raw!r}") from None


def parse_training_days(raw: Union[str, int]) -> int:
    """Parse the number of training days; only 5, 6 and 7 are supported."""
    if isinstance(raw, bool):
        raise InputRangeError(f"Training days must be an integer, got {raw!r}")
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    try:
        days = int(str(raw).strip())
    except ValueError:
        raise InputRangeError(f"Training days must be an integer, got {raw!r}") from None

    validate_training_days(days)
    return days


def validate_training_days(days: Any):
    if days not in SUPPORTED_TRAINING_DAYS:
        supported = ", ".join(str(d) for d in SUPPORTED_TRAINING_DAYS)
        raise InputRangeError(f"Training days must be one of {supported}, got {days!r}")


@dataclass(frozen=True)
class PlanRequest:
    """
    Validated inputs for one plan.

    Construct via from_raw to get all checks; direct construction is
    re-checked in __post_init__.
    """
    race_time: RaceTime
    weekly_mileage: float
    phase: TrainingPhase
    training_days: int

    def __post_init__(self):
        if self.race_time.total_seconds <= 0:
            raise InputRangeError("Please enter a realistic 5K time")
        if not math.isfinite(self.weekly_mileage) or self.weekly_mileage <= 0:
            raise InputRangeError(
                f"Weekly mileage must be positive, got {self.weekly_mileage!r}"
            )
        if not isinstance(self.phase, TrainingPhase):
            raise InputRangeError(f"Unsupported training phase {self.phase!r}")
        validate_training_days(self.training_days)

    @classmethod
    def from_raw(
        cls,
        weekly_mileage: Union[str, float, int],
        phase: Union[str, TrainingPhase],
        race_time: str,
        training_days: Union[str, int]
    ) -> 'PlanRequest':
        """
        Validate raw host fields.

        The race time is checked first, matching the order the form is read.
        """
        parsed_time = parse_race_time(race_time)
        return cls(
            race_time=parsed_time,
            weekly_mileage=parse_weekly_mileage(weekly_mileage),
            phase=parse_training_phase(phase),
            training_days=parse_training_days(training_days),
        )

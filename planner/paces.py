"""
Training Paces: Named paces derived from a 5K race time.

Based on:
- Common coaching multipliers relative to current 5K pace
- Daniels-style intensity names (Easy, Tempo, Threshold, Interval, Repeat)

Every pace is expressed in seconds per mile.

    base_pace = 5K seconds / 3.107
    pace(name) = base_pace × multiplier(name)
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Dict, Union
import math

from .errors import InputRangeError
from .inputs import RaceTime
from .params import PlanParams


class PaceName(Enum):
    """Named training intensities."""
    EASY_LONG = "easy_long"     # Easy, recovery and long runs
    TEMPO = "tempo"             # Sustained 20-40 min efforts
    THRESHOLD = "threshold"     # 5-15 min repeats
    INTERVAL = "interval"       # 800m-1000m repeats
    REPEAT = "repeat"           # 200m-400m repeats


@dataclass(frozen=True)
class PaceSet:
    """Training paces in seconds per mile."""
    easy_long: float
    tempo: float
    threshold: float
    interval: float
    repeat: float

    def __getitem__(self, name: PaceName) -> float:
        return getattr(self, name.value)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class FormattedPaces:
    """Training paces as "M:SS" strings."""
    easy_long: str
    tempo: str
    threshold: str
    interval: str
    repeat: str

    def __getitem__(self, name: PaceName) -> str:
        return getattr(self, name.value)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return asdict(self)


def calculate_base_pace(
    total_seconds: float,
    params: Optional[PlanParams] = None
) -> float:
    """Seconds per mile at current 5K fitness."""
    if params is None:
        params = PlanParams()

    if not math.isfinite(total_seconds) or total_seconds <= 0:
        raise InputRangeError(f"5K time must be positive, got {total_seconds!r}")

    return total_seconds / params.five_k_miles


def calculate_paces(
    race_time: Union[RaceTime, float],
    params: Optional[PlanParams] = None
) -> PaceSet:
    """
    Calculate all training paces from a 5K effort.

    Args:
        race_time: RaceTime or total 5K seconds
        params: PlanParams with multipliers (uses defaults if None)

    Returns:
        PaceSet in seconds per mile, ordered
        repeat < interval < threshold < tempo < easy_long
    """
    if params is None:
        params = PlanParams()

    total_seconds = race_time.total_seconds if isinstance(race_time, RaceTime) else race_time
    base_pace = calculate_base_pace(total_seconds, params)

    return PaceSet(
        easy_long=base_pace * params.easy_long_multiplier,
        tempo=base_pace * params.tempo_multiplier,
        threshold=base_pace * params.threshold_multiplier,
        interval=base_pace * params.interval_multiplier,
        repeat=base_pace * params.repeat_multiplier,
    )


def format_pace(pace_seconds: float) -> str:
    """
    Format a pace as "M:SS".

    The total is rounded to whole seconds before splitting into minutes
    and seconds, so 419.6 renders as "7:00" and never "6:60". Halves
    round up.

    Args:
        pace_seconds: Seconds per distance unit

    Returns:
        Pace string, seconds always two digits
    """
    total = math.floor(pace_seconds + 0.5)
    minutes, seconds = divmod(total, 60)
    return f"{minutes}:{seconds:02d}"


def format_paces(paces: PaceSet) -> FormattedPaces:
    """Format every pace in a PaceSet."""
    return FormattedPaces(**{
        name.value: format_pace(paces[name]) for name in PaceName
    })


if __name__ == '__main__':
    print("Testing pace calculations...")

    for time_text in ["16:30", "20:00", "25:00", "32:15"]:
        minutes, seconds = (int(p) for p in time_text.split(':'))
        paces = calculate_paces(minutes * 60 + seconds)
        formatted = format_paces(paces)
        print(f"\n5K {time_text}:")
        for name in PaceName:
            print(f"  {name.value:10s}: {formatted[name]}/mile")
        assert paces.repeat < paces.interval < paces.threshold < paces.tempo < paces.easy_long

    print("\nAll tests passed!")

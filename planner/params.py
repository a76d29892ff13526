"""
Plan Parameters: Tunable constants for pace and mileage calculations.

All percentage values are expressed as decimals (e.g., 0.17 = 17%).
Pace multipliers are relative to current 5K pace (seconds per mile).

Based on:
- Common coaching standards relative to 5K race pace
- A 6-day base week with one long run and Sunday rest
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Tuple, List
import json

from .errors import PlanConfigError


@dataclass
class PlanParams:
    """
    Tunable parameters for the weekly plan builder.

    Defaults reproduce the standard 6-day week.
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PACE CALCULATION
    # ═══════════════════════════════════════════════════════════════════════════

    five_k_miles: float = 3.107

    easy_long_multiplier: float = 1.18    # 15-20% slower than 5K pace
    tempo_multiplier: float = 1.07        # 5-10% slower, held 20-40 min
    threshold_multiplier: float = 1.035   # 3-5% slower, 5-15 min repeats
    interval_multiplier: float = 0.98     # 5K pace or slightly faster
    repeat_multiplier: float = 0.88       # 10-15% faster, 200s and 400s

    # ═══════════════════════════════════════════════════════════════════════════
    # BASE WEEK DISTRIBUTION (Monday..Friday, Sunday)
    # ═══════════════════════════════════════════════════════════════════════════
    # Saturday takes whatever is left so the week sums to 1.0

    monday_share: float = 0.17
    tuesday_share: float = 0.18
    wednesday_share: float = 0.17
    thursday_share: float = 0.17
    friday_share: float = 0.18
    sunday_share: float = 0.00

    long_run_fallback: float = 0.28   # Used if the residual is not positive

    # ═══════════════════════════════════════════════════════════════════════════
    # TRAINING DAY ADJUSTMENTS
    # ═══════════════════════════════════════════════════════════════════════════

    # 5 days: Thursday's volume moves to Mon/Wed/Sat
    five_day_monday_bonus: float = 0.05
    five_day_wednesday_bonus: float = 0.05
    five_day_saturday_bonus: float = 0.07

    # 7 days: Sunday chill run taken from the long run
    seven_day_sunday_share: float = 0.05

    # ═══════════════════════════════════════════════════════════════════════════
    # PHASE ADJUSTMENTS
    # ═══════════════════════════════════════════════════════════════════════════

    taper_volume_factor: float = 0.6   # 40% volume reduction

    balance_tolerance: float = 1e-9

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'PlanParams':
        """Create parameters from dictionary."""
        unknown = sorted(set(d) - set(cls.__dataclass_fields__))
        if unknown:
            raise PlanConfigError(f"Unknown plan parameters: {', '.join(unknown)}")
        return cls(**d)

    @property
    def fixed_shares(self) -> List[float]:
        """Shares of every day except Saturday, in calendar order."""
        return [
            self.monday_share,
            self.tuesday_share,
            self.wednesday_share,
            self.thursday_share,
            self.friday_share,
            self.sunday_share,
        ]

    def validate(self) -> Tuple[bool, str]:
        """Validate parameter constraints."""
        issues = []

        if self.five_k_miles <= 0:
            issues.append("5K distance must be positive")

        # Multiplier ordering keeps repeat < interval < threshold < tempo < easy
        if not (0 < self.repeat_multiplier < self.interval_multiplier
                < self.threshold_multiplier < self.tempo_multiplier
                < self.easy_long_multiplier):
            issues.append("Pace multipliers must be ascending from repeat to easy/long")

        if any(share < 0 or share > 1 for share in self.fixed_shares):
            issues.append("Day shares must be in [0, 1]")

        if sum(self.fixed_shares) >= 1.0:
            issues.append("Fixed day shares leave no volume for the long run")

        if not (0 < self.long_run_fallback <= 1):
            issues.append("Long run fallback must be in (0, 1]")

        redistributed = (self.five_day_monday_bonus + self.five_day_wednesday_bonus
                         + self.five_day_saturday_bonus)
        if abs(redistributed - self.thursday_share) > 1e-6:
            issues.append("Five-day bonuses must add up to Thursday's share")

        if not (0 <= self.seven_day_sunday_share < 1):
            issues.append("Seven-day Sunday share must be in [0, 1)")

        if not (0 < self.taper_volume_factor <= 1):
            issues.append("Taper volume factor must be in (0, 1]")

        if issues:
            return False, "; ".join(issues)
        return True, "Valid"


def load_params(path: str) -> PlanParams:
    """
    Load plan parameters from a JSON file.

    Keys not present in the file keep their defaults.

    Raises:
        PlanConfigError: If the file holds unknown keys or invalid values
    """
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise PlanConfigError(f"Expected a JSON object in {path}")

    params = PlanParams.from_dict(data)
    is_valid, message = params.validate()
    if not is_valid:
        raise PlanConfigError(message)
    return params


def save_params(params: PlanParams, path: str):
    """Write plan parameters to a JSON file."""
    with open(path, 'w') as f:
        json.dump(params.to_dict(), f, indent=2)

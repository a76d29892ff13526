"""
Weekly Plan Builder: Percentage-based mileage distribution across a week.

The plan is built in three steps, each mutating the same WeeklyPlan:

1. Base week: a 6-day table (Sunday rest) with the long run on Saturday
   taking whatever share is left so the week sums to 1.0.
2. Training days: 5 days merges Thursday into Friday, 7 days adds a
   Sunday chill run taken from the long run.
3. Phase: BASE/STRENGTH/PEAK rewrite the two quality sessions, TAPER
   cuts every day by 40% and softens the workouts.

Focus text embeds formatted paces, so the builder consumes a PaceSet.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List, Tuple, Callable
import warnings

import numpy as np

from .errors import InputRangeError
from .inputs import TrainingPhase, validate_training_days
from .paces import PaceSet, FormattedPaces, format_paces
from .params import PlanParams


class DayOfWeek(Enum):
    """Days of the week."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


class SessionType(Enum):
    """Classification of a day's session."""
    EASY = "easy"           # Easy run plus core/strides
    RECOVERY = "recovery"   # Easy/recovery run
    SPEED = "speed"         # Tuesday quality: fartlek, repeats, intervals
    TEMPO = "tempo"         # Second quality session
    LONG = "long"           # Long run
    CHILL = "chill"         # Capped Sunday run in 7-day weeks
    REST = "rest"


REST_DAY = "Rest Day"

PHASE_NOTES = {
    TrainingPhase.BASE: "Focus on Easy effort and building distance. Speed work is controlled Fartlek.",
    TrainingPhase.STRENGTH: "Focus on Threshold and Tempo volume. Speed work introduces longer repeats (e.g., 1000s).",
    TrainingPhase.PEAK: "Focus on Race Pace (Intervals) and maintenance. Highest volume week.",
    TrainingPhase.TAPER: "Focus on rest and reduced volume (~40% reduction). Keep strides sharp.",
}

# Checked in order; the last match wins
TAPER_REPLACEMENTS = [
    ("Long Run", "Shortened Long Run"),
    ("Threshold", "Strides Only (4x100m)"),
    ("Tempo", "Very Easy Run"),
]


@dataclass
class DayPlan:
    """
    One day of the week.

    percent is the day's share of weekly mileage (0.0-1.0).
    """
    day: DayOfWeek
    focus: str
    percent: float
    is_run: bool = True
    session: SessionType = SessionType.EASY

    @property
    def label(self) -> str:
        return self.day.label

    def make_rest(self):
        self.focus = REST_DAY
        self.percent = 0.0
        self.is_run = False
        self.session = SessionType.REST

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'day': self.label,
            'focus': self.focus,
            'percent': self.percent,
            'is_run': self.is_run,
            'session': self.session.value,
        }


@dataclass
class WeeklyPlan:
    """
    Seven DayPlans in calendar order.

    volume_factor is 1.0 until a taper scales the whole week down.
    """
    days: List[DayPlan]
    paces: FormattedPaces
    training_days: int = 6
    phase: Optional[TrainingPhase] = None
    volume_factor: float = 1.0
    notes: List[str] = field(default_factory=list)

    def __getitem__(self, day: DayOfWeek) -> DayPlan:
        return self.days[day.value]

    def __iter__(self):
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    @property
    def percents(self) -> np.ndarray:
        return np.array([d.percent for d in self.days])

    @property
    def percent_total(self) -> float:
        return float(np.sum(self.percents))

    @property
    def run_days(self) -> List[DayPlan]:
        return [d for d in self.days if d.is_run]

    def find_session(self, session: SessionType) -> Optional[DayPlan]:
        """First day holding a session type, or None."""
        for day_plan in self.days:
            if day_plan.session == session:
                return day_plan
        return None

    def validate(self, tolerance: float = 1e-9) -> Tuple[bool, str]:
        """
        Check calendar order and that percentages add up.

        The expected total is 1.0 scaled by volume_factor.
        """
        issues = []

        if [d.day for d in self.days] != list(DayOfWeek):
            issues.append("Days must be the seven calendar days in order")

        if np.any(self.percents < 0):
            issues.append("Day percentages cannot be negative")

        expected = self.volume_factor
        if not np.isclose(self.percent_total, expected, rtol=0.0, atol=tolerance):
            issues.append(
                f"Day percentages sum to {self.percent_total:.12f}, expected {expected:.12f}"
            )

        if issues:
            return False, "; ".join(issues)
        return True, "Valid"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'days': [d.to_dict() for d in self.days],
            'paces': self.paces.to_dict(),
            'training_days': self.training_days,
            'phase': self.phase.value if self.phase else None,
            'volume_factor': self.volume_factor,
            'percent_total': self.percent_total,
        }


# =============================================================================
# Step 1: base week
# =============================================================================

def build_base_plan(
    paces: FormattedPaces,
    params: Optional[PlanParams] = None
) -> WeeklyPlan:
    """
    Build the default 6-day week with Sunday rest.

    Saturday's long run takes the residual 1.0 - sum(other days). If the
    residual is not positive the long run falls back to
    params.long_run_fallback and a warning is issued.

    Args:
        paces: Formatted paces embedded in the focus text
        params: PlanParams (uses defaults if None)

    Returns:
        WeeklyPlan for 6 training days
    """
    if params is None:
        params = PlanParams()

    easy = paces.easy_long
    days = [
        DayPlan(DayOfWeek.MONDAY, f"Easy Run ({easy}/mile) + Core/Strides",
                params.monday_share, session=SessionType.EASY),
        DayPlan(DayOfWeek.TUESDAY,
                f"Threshold Repeats (e.g., 4 x 1-mile @ {paces.threshold}/mile) + Bands",
                params.tuesday_share, session=SessionType.SPEED),
        DayPlan(DayOfWeek.WEDNESDAY, f"Easy/Recovery Run ({easy}/mile) + Core/Strides",
                params.wednesday_share, session=SessionType.RECOVERY),
        DayPlan(DayOfWeek.THURSDAY, f"Tempo Run ({paces.tempo}/mile) + Bands",
                params.thursday_share, session=SessionType.TEMPO),
        DayPlan(DayOfWeek.FRIDAY, f"Easy Run ({easy}/mile) + Core/Strides",
                params.friday_share, session=SessionType.EASY),
        DayPlan(DayOfWeek.SATURDAY, f"Long Run ({easy}/mile)",
                0.0, session=SessionType.LONG),
        DayPlan(DayOfWeek.SUNDAY, REST_DAY, params.sunday_share,
                is_run=False, session=SessionType.REST),
    ]

    plan = WeeklyPlan(days=days, paces=paces, training_days=6)

    residual = 1.0 - sum(params.fixed_shares)
    if residual > 0:
        plan[DayOfWeek.SATURDAY].percent = residual
    else:
        warnings.warn(
            f"Long run residual {residual:.3f} is not positive; "
            f"using fallback share {params.long_run_fallback:.2f}"
        )
        plan[DayOfWeek.SATURDAY].percent = params.long_run_fallback
        plan.notes.append("long_run_fallback")

    return plan


# =============================================================================
# Step 2: training days
# =============================================================================

def _merge_thursday_into_friday(plan: WeeklyPlan, params: PlanParams):
    thursday = plan[DayOfWeek.THURSDAY]
    friday = plan[DayOfWeek.FRIDAY]

    friday.focus = thursday.focus
    friday.session = thursday.session
    thursday.make_rest()

    # Thursday's volume goes to Monday, Wednesday and the long run
    plan[DayOfWeek.MONDAY].percent += params.five_day_monday_bonus
    plan[DayOfWeek.WEDNESDAY].percent += params.five_day_wednesday_bonus
    plan[DayOfWeek.SATURDAY].percent += params.five_day_saturday_bonus


def _keep_six_days(plan: WeeklyPlan, params: PlanParams):
    pass


def _add_sunday_chill_run(plan: WeeklyPlan, params: PlanParams):
    sunday = plan[DayOfWeek.SUNDAY]
    share = params.seven_day_sunday_share

    sunday.focus = (f"Chill Run ({plan.paces.easy_long}/mile) - "
                    f"No more than {share * 100:.0f}% volume")
    sunday.percent = share
    sunday.is_run = True
    sunday.session = SessionType.CHILL

    plan[DayOfWeek.SATURDAY].percent -= share


TRAINING_DAY_ADJUSTMENTS: Dict[int, Callable[[WeeklyPlan, PlanParams], None]] = {
    5: _merge_thursday_into_friday,
    6: _keep_six_days,
    7: _add_sunday_chill_run,
}


def adjust_for_training_days(
    plan: WeeklyPlan,
    training_days: int,
    params: Optional[PlanParams] = None
) -> WeeklyPlan:
    """
    Adapt the 6-day base week to 5 or 7 training days.

    Raises:
        InputRangeError: training_days is not 5, 6 or 7
    """
    if params is None:
        params = PlanParams()

    validate_training_days(training_days)
    TRAINING_DAY_ADJUSTMENTS[training_days](plan, params)
    plan.training_days = training_days
    return plan


# =============================================================================
# Step 3: phase
# =============================================================================

def _set_quality_sessions(plan: WeeklyPlan, speed_focus: str, tempo_focus: str):
    # The tempo session sits on Friday in 5-day weeks
    speed_day = plan.find_session(SessionType.SPEED)
    tempo_day = plan.find_session(SessionType.TEMPO)
    if speed_day is not None:
        speed_day.focus = speed_focus
    if tempo_day is not None:
        tempo_day.focus = tempo_focus


def _apply_base(plan: WeeklyPlan, params: PlanParams):
    p = plan.paces
    _set_quality_sessions(
        plan,
        f"Light Fartlek (e.g., 5 x 2-min hard @ {p.interval}/mile) + Bands",
        f"Tempo Run (short duration) @ {p.tempo}/mile + Bands",
    )


def _apply_strength(plan: WeeklyPlan, params: PlanParams):
    p = plan.paces
    _set_quality_sessions(
        plan,
        f"Threshold Repeats (e.g., 4 x 1000m @ {p.threshold}/mile) + Bands",
        f"Longer Tempo Run (e.g., 4 miles @ {p.tempo}/mile) + Bands",
    )


def _apply_peak(plan: WeeklyPlan, params: PlanParams):
    p = plan.paces
    _set_quality_sessions(
        plan,
        f"Intervals (e.g., 6 x 800m @ {p.interval}/mile) + Bands",
        f"Threshold Repeats (e.g., 3 x 1-mile @ {p.threshold}/mile) + Bands",
    )


def taper_focus(focus: str) -> str:
    """
    Soften a focus string for a taper week.

    Keywords are checked in TAPER_REPLACEMENTS order against the unmodified
    text; the last match wins. Text with no keyword is returned unchanged.
    """
    result = focus
    for keyword, replacement in TAPER_REPLACEMENTS:
        if keyword in focus:
            result = replacement
    return result


def _apply_taper(plan: WeeklyPlan, params: PlanParams):
    factor = params.taper_volume_factor
    for day_plan in plan:
        day_plan.percent *= factor
        day_plan.focus = taper_focus(day_plan.focus)
    plan.volume_factor *= factor


PHASE_ADJUSTMENTS: Dict[TrainingPhase, Callable[[WeeklyPlan, PlanParams], None]] = {
    TrainingPhase.BASE: _apply_base,
    TrainingPhase.STRENGTH: _apply_strength,
    TrainingPhase.PEAK: _apply_peak,
    TrainingPhase.TAPER: _apply_taper,
}


def apply_phase(
    plan: WeeklyPlan,
    phase: TrainingPhase,
    params: Optional[PlanParams] = None
) -> WeeklyPlan:
    """
    Rewrite sessions (and, for TAPER, volume) for a training phase.

    Raises:
        InputRangeError: phase is not a TrainingPhase
    """
    if params is None:
        params = PlanParams()

    adjustment = PHASE_ADJUSTMENTS.get(phase)
    if adjustment is None:
        raise InputRangeError(f"Unsupported training phase {phase!r}")

    adjustment(plan, params)
    plan.phase = phase
    return plan


def phase_note(phase: TrainingPhase) -> str:
    """One-line summary shown above the schedule."""
    return f"Phase: {phase.value}. {PHASE_NOTES[phase]}"


def build_plan(
    paces: PaceSet,
    training_days: int,
    phase: TrainingPhase,
    params: Optional[PlanParams] = None
) -> WeeklyPlan:
    """
    Build the full weekly plan.

    Args:
        paces: Training paces in seconds per mile
        training_days: 5, 6 or 7
        phase: Training phase
        params: PlanParams (uses defaults if None)

    Returns:
        WeeklyPlan after base, training-day and phase steps
    """
    if params is None:
        params = PlanParams()

    validate_training_days(training_days)
    if phase not in PHASE_ADJUSTMENTS:
        raise InputRangeError(f"Unsupported training phase {phase!r}")

    plan = build_base_plan(format_paces(paces), params)
    adjust_for_training_days(plan, training_days, params)
    apply_phase(plan, phase, params)
    return plan


if __name__ == '__main__':
    from .paces import calculate_paces

    print("Testing weekly plan builder...")
    print("=" * 60)

    paces = calculate_paces(20 * 60)
    for days in (5, 6, 7):
        for phase in TrainingPhase:
            plan = build_plan(paces, days, phase)
            is_valid, message = plan.validate()
            print(f"{days} days / {phase.value:8s}: total {plan.percent_total:.3f} ({message})")
            assert is_valid, message

    print("\n" + "=" * 60)
    print("All tests completed!")

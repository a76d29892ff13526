"""
Schedule: Turns a WeeklyPlan into display rows.

This is the last step of the pipeline:

    PlanRequest -> calculate_paces -> build_plan -> materialize_schedule

Rows carry mileage rounded to one decimal; the TOTAL row sums only the
days with a positive share and restates the key paces.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Dict, Any, List, Union

from .errors import PlanConfigError
from .inputs import PlanRequest, TrainingPhase
from .paces import PaceSet, calculate_paces
from .params import PlanParams
from .weekly_plan import WeeklyPlan, build_plan, phase_note


TOTAL_LABEL = "TOTAL"


def round_mileage(value: float) -> float:
    """Round to one decimal, halves away from zero."""
    return float(Decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def format_mileage(mileage: float) -> str:
    if mileage > 0:
        return f"{mileage:.1f} miles"
    return "0 miles"


@dataclass(frozen=True)
class ScheduleRow:
    """A rendered table row."""
    day: str
    focus: str
    mileage: float
    mileage_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'day': self.day,
            'focus': self.focus,
            'mileage': self.mileage,
            'mileage_text': self.mileage_text,
        }


@dataclass
class Schedule:
    """
    Complete output for one request.

    rows holds the seven days; total_row is kept separate so renderers can
    style it.
    """
    rows: List[ScheduleRow]
    total_row: ScheduleRow
    phase_note: str
    plan: WeeklyPlan
    paces: PaceSet
    weekly_mileage: float
    request: Optional[PlanRequest] = None
    notes: List[str] = field(default_factory=list)

    @property
    def total_mileage(self) -> float:
        return self.total_row.mileage

    @property
    def all_rows(self) -> List[ScheduleRow]:
        return self.rows + [self.total_row]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'phase_note': self.phase_note,
            'weekly_mileage': self.weekly_mileage,
            'training_days': self.plan.training_days,
            'phase': self.plan.phase.value if self.plan.phase else None,
            'paces': {
                'seconds_per_mile': self.paces.to_dict(),
                'formatted': self.plan.paces.to_dict(),
            },
            'rows': [r.to_dict() for r in self.rows],
            'total': self.total_row.to_dict(),
        }


def materialize_schedule(
    plan: WeeklyPlan,
    weekly_mileage: float,
    paces: PaceSet
) -> Schedule:
    """
    Produce display rows from a finished plan.

    Formula:
        mileage(day) = round(weekly_mileage × percent(day), 1)
        total = Σ mileage(day) for days with percent > 0

    Args:
        plan: Finished WeeklyPlan (read only)
        weekly_mileage: Target weekly mileage
        paces: PaceSet the plan was built from

    Returns:
        Schedule with seven day rows and a TOTAL row
    """
    rows = []
    total = 0.0

    for day_plan in plan:
        mileage = round_mileage(weekly_mileage * day_plan.percent)
        if day_plan.percent > 0:
            total += mileage
        rows.append(ScheduleRow(
            day=day_plan.label,
            focus=day_plan.focus,
            mileage=mileage,
            mileage_text=format_mileage(mileage),
        ))

    fp = plan.paces
    total = round(total, 1)
    total_row = ScheduleRow(
        day=TOTAL_LABEL,
        focus=(f"Target Paces (per mile): Easy: {fp.easy_long} | "
               f"Tempo: {fp.tempo} | Threshold: {fp.threshold}"),
        mileage=total,
        mileage_text=f"{total:.1f} miles",
    )

    note = phase_note(plan.phase) if plan.phase else ""

    return Schedule(
        rows=rows,
        total_row=total_row,
        phase_note=note,
        plan=plan,
        paces=paces,
        weekly_mileage=weekly_mileage,
        notes=list(plan.notes),
    )


def generate_program(
    request: PlanRequest,
    params: Optional[PlanParams] = None
) -> Schedule:
    """
    Run the full pipeline for a validated request.

    Args:
        request: Validated PlanRequest
        params: PlanParams (uses defaults if None)

    Returns:
        Schedule ready for rendering

    Raises:
        PlanConfigError: params are invalid or the plan does not balance
    """
    if params is None:
        params = PlanParams()

    is_valid, message = params.validate()
    if not is_valid:
        raise PlanConfigError(message)

    paces = calculate_paces(request.race_time, params)
    plan = build_plan(paces, request.training_days, request.phase, params)

    is_balanced, message = plan.validate(params.balance_tolerance)
    if not is_balanced:
        raise PlanConfigError(message)

    schedule = materialize_schedule(plan, request.weekly_mileage, paces)
    schedule.request = request
    return schedule


def generate_program_from_raw(
    weekly_mileage: Union[str, float, int],
    phase: Union[str, TrainingPhase],
    race_time: str,
    training_days: Union[str, int],
    params: Optional[PlanParams] = None
) -> Schedule:
    """
    Validate raw host fields and run the pipeline.

    Raises:
        InputFormatError: race time is not MM:SS
        InputRangeError: any value outside its supported range
    """
    request = PlanRequest.from_raw(
        weekly_mileage=weekly_mileage,
        phase=phase,
        race_time=race_time,
        training_days=training_days,
    )
    return generate_program(request, params)

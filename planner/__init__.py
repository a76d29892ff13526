"""
Pace and mileage calculations for a personalized training week.

This package provides:
- Input parsing and validation (5K time, mileage, phase, days)
- Training paces from a 5K time
- Weekly mileage distribution by training days and phase
- Schedule rows ready for rendering
"""

# Errors
from .errors import (
    PlanInputError,
    InputFormatError,
    InputRangeError,
    PlanConfigError,
)

# Configuration
from .params import (
    PlanParams,
    load_params,
    save_params,
)

# Inputs
from .inputs import (
    SUPPORTED_TRAINING_DAYS,
    TrainingPhase,
    RaceTime,
    PlanRequest,
    parse_race_time,
    parse_weekly_mileage,
    parse_training_phase,
    parse_training_days,
)

# Paces
from .paces import (
    PaceName,
    PaceSet,
    FormattedPaces,
    calculate_base_pace,
    calculate_paces,
    format_pace,
    format_paces,
)

# Weekly plan
from .weekly_plan import (
    DayOfWeek,
    SessionType,
    DayPlan,
    WeeklyPlan,
    PHASE_NOTES,
    build_base_plan,
    adjust_for_training_days,
    apply_phase,
    taper_focus,
    phase_note,
    build_plan,
)

# Schedule
from .schedule import (
    ScheduleRow,
    Schedule,
    round_mileage,
    materialize_schedule,
    generate_program,
    generate_program_from_raw,
)

__all__ = [
    # Errors
    'PlanInputError',
    'InputFormatError',
    'InputRangeError',
    'PlanConfigError',
    # Configuration
    'PlanParams',
    'load_params',
    'save_params',
    # Inputs
    'SUPPORTED_TRAINING_DAYS',
    'TrainingPhase',
    'RaceTime',
    'PlanRequest',
    'parse_race_time',
    'parse_weekly_mileage',
    'parse_training_phase',
    'parse_training_days',
    # Paces
    'PaceName',
    'PaceSet',
    'FormattedPaces',
    'calculate_base_pace',
    'calculate_paces',
    'format_pace',
    'format_paces',
    # Weekly plan
    'DayOfWeek',
    'SessionType',
    'DayPlan',
    'WeeklyPlan',
    'PHASE_NOTES',
    'build_base_plan',
    'adjust_for_training_days',
    'apply_phase',
    'taper_focus',
    'phase_note',
    'build_plan',
    # Schedule
    'ScheduleRow',
    'Schedule',
    'round_mileage',
    'materialize_schedule',
    'generate_program',
    'generate_program_from_raw',
]

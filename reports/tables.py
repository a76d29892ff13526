"""
Table rendering for weekly schedules.

Generates the fixed-width text table, pandas DataFrames for CSV export,
JSON payloads, and a side-by-side comparison of all training phases.
"""

from typing import List, Dict, Any, Optional
import json

import pandas as pd

from planner.inputs import PlanRequest, TrainingPhase
from planner.params import PlanParams
from planner.schedule import Schedule, generate_program


SCHEDULE_COLUMNS = ['day', 'focus', 'percent', 'mileage', 'mileage_text']


def format_schedule_table(
    schedule: Schedule,
    title: str = "Weekly Training Schedule"
) -> str:
    """
    Generate a text table from a schedule.

    Args:
        schedule: Schedule to render
        title: Table title

    Returns:
        Formatted table string
    """
    focus_width = max(len(r.focus) for r in schedule.all_rows)
    width = 12 + focus_width + 14

    lines = [
        "=" * width,
        title,
        "=" * width,
        schedule.phase_note,
        "",
        f"{'Day':<11} {'Focus':<{focus_width}} {'Mileage':>13}",
        "-" * width,
    ]

    for row in schedule.rows:
        lines.append(f"{row.day:<11} {row.focus:<{focus_width}} {row.mileage_text:>13}")

    total = schedule.total_row
    lines.append("-" * width)
    lines.append(f"{total.day:<11} {total.focus:<{focus_width}} {total.mileage_text:>13}")
    lines.append("=" * width)

    return "\n".join(lines)


def format_paces_table(schedule: Schedule) -> str:
    """List every training pace, seconds and M:SS."""
    lines = ["Training Paces (per mile):", "=" * 40]
    seconds = schedule.paces.to_dict()
    formatted = schedule.plan.paces.to_dict()
    for name, value in seconds.items():
        lines.append(f"{name:10s}: {formatted[name]:>6s} ({value:6.1f} s)")
    return "\n".join(lines)


def schedule_to_dataframe(schedule: Schedule, include_total: bool = False) -> pd.DataFrame:
    """
    Convert a schedule to a DataFrame, one row per day.

    Args:
        schedule: Schedule to convert
        include_total: Append the TOTAL row (percent is the week total)

    Returns:
        DataFrame with SCHEDULE_COLUMNS
    """
    records = []
    for row, day_plan in zip(schedule.rows, schedule.plan):
        records.append({
            'day': row.day,
            'focus': row.focus,
            'percent': day_plan.percent,
            'mileage': row.mileage,
            'mileage_text': row.mileage_text,
        })

    if include_total:
        total = schedule.total_row
        records.append({
            'day': total.day,
            'focus': total.focus,
            'percent': schedule.plan.percent_total,
            'mileage': total.mileage,
            'mileage_text': total.mileage_text,
        })

    return pd.DataFrame.from_records(records, columns=SCHEDULE_COLUMNS)


def export_schedule_csv(schedule: Schedule, filepath: str) -> None:
    """
    Export a schedule, TOTAL row included, to CSV.

    Args:
        schedule: Schedule to export
        filepath: Output file path
    """
    df = schedule_to_dataframe(schedule, include_total=True)
    df.to_csv(filepath, index=False)


def schedule_to_dict(schedule: Schedule) -> Dict[str, Any]:
    """JSON-ready payload for a host UI."""
    return schedule.to_dict()


def schedule_to_json(schedule: Schedule, indent: int = 2) -> str:
    return json.dumps(schedule_to_dict(schedule), indent=indent)


def compare_phases(
    request: PlanRequest,
    params: Optional[PlanParams] = None,
    phases: Optional[List[TrainingPhase]] = None
) -> pd.DataFrame:
    """
    Daily mileage for each phase at the same day count and mileage.

    Args:
        request: Base request; its phase is ignored
        params: PlanParams (uses defaults if None)
        phases: Phases to compare (all if None)

    Returns:
        DataFrame indexed by day (TOTAL last), one column per phase
    """
    if phases is None:
        phases = list(TrainingPhase)

    columns = {}
    index = None
    for phase in phases:
        phase_request = PlanRequest(
            race_time=request.race_time,
            weekly_mileage=request.weekly_mileage,
            phase=phase,
            training_days=request.training_days,
        )
        schedule = generate_program(phase_request, params)
        columns[phase.value] = [r.mileage for r in schedule.all_rows]
        if index is None:
            index = [r.day for r in schedule.all_rows]

    df = pd.DataFrame(columns, index=index)
    df.index.name = 'day'
    return df


def format_phase_comparison(df: pd.DataFrame) -> str:
    """
    Text report for a compare_phases DataFrame.

    Args:
        df: Output of compare_phases

    Returns:
        Formatted comparison string
    """
    header = f"{'Day':<11}" + "".join(f"{col:>10}" for col in df.columns)
    lines = ["Phase Comparison (miles)", "=" * len(header), header, "-" * len(header)]

    for day, values in df.iterrows():
        if day == 'TOTAL':
            lines.append("-" * len(header))
        lines.append(f"{day:<11}" + "".join(f"{v:>10.1f}" for v in values))

    return "\n".join(lines)

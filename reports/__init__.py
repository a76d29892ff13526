"""Rendering and visualization utilities."""

from .tables import (
    format_schedule_table,
    format_paces_table,
    schedule_to_dataframe,
    export_schedule_csv,
    schedule_to_dict,
    schedule_to_json,
    compare_phases,
    format_phase_comparison,
)
from .visualizations import (
    plot_weekly_mileage,
    plot_phase_comparison,
)

__all__ = [
    'format_schedule_table',
    'format_paces_table',
    'schedule_to_dataframe',
    'export_schedule_csv',
    'schedule_to_dict',
    'schedule_to_json',
    'compare_phases',
    'format_phase_comparison',
    'plot_weekly_mileage',
    'plot_phase_comparison',
]

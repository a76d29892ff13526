"""
Visualization utilities for weekly schedules.

Provides charts for:
- Daily mileage of a single schedule
- Daily mileage across training phases
"""

from typing import Optional, Tuple, Dict
import numpy as np

import matplotlib.pyplot as plt
from matplotlib.patches import Patch

import pandas as pd

from planner.schedule import Schedule
from planner.weekly_plan import SessionType


SESSION_COLORS: Dict[SessionType, str] = {
    SessionType.EASY: '#8fd19e',
    SessionType.RECOVERY: '#b6e3c0',
    SessionType.SPEED: '#e4572e',
    SessionType.TEMPO: '#f3a712',
    SessionType.LONG: '#2e86ab',
    SessionType.CHILL: '#d8f3dc',
    SessionType.REST: '#cccccc',
}


def plot_weekly_mileage(
    schedule: Schedule,
    title: Optional[str] = None,
    figsize: Tuple[int, int] = (10, 5),
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Bar chart of daily mileage colored by session type.

    Args:
        schedule: Schedule to plot
        title: Plot title (phase note if None)
        figsize: Figure size
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()

    labels = [r.day[:3] for r in schedule.rows]
    mileage = np.array([r.mileage for r in schedule.rows])
    colors = [SESSION_COLORS[d.session] for d in schedule.plan]

    x = np.arange(len(labels))
    bars = ax.bar(x, mileage, color=colors, edgecolor='black', linewidth=0.5)

    for bar, value in zip(bars, mileage):
        if value > 0:
            ax.text(bar.get_x() + bar.get_width() / 2, value, f"{value:.1f}",
                    ha='center', va='bottom', fontsize=9)

    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_ylabel('Miles')
    ax.set_title(title or f"{schedule.phase_note} Total {schedule.total_row.mileage_text}",
                 fontsize=10)
    ax.grid(True, axis='y', alpha=0.3)

    used = []
    for d in schedule.plan:
        if d.session not in used:
            used.append(d.session)
    handles = [Patch(facecolor=SESSION_COLORS[s], edgecolor='black', label=s.value)
               for s in used]
    ax.legend(handles=handles, loc='upper left', fontsize=8)

    return fig


def plot_phase_comparison(
    df: pd.DataFrame,
    title: str = "Daily Mileage by Phase",
    figsize: Tuple[int, int] = (12, 6),
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Grouped bar chart of a compare_phases DataFrame.

    Args:
        df: Output of reports.tables.compare_phases
        title: Plot title
        figsize: Figure size
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()

    days = df.drop(index='TOTAL', errors='ignore')
    x = np.arange(len(days.index))
    n_phases = len(days.columns)
    width = 0.8 / max(n_phases, 1)

    for i, phase in enumerate(days.columns):
        offset = (i - (n_phases - 1) / 2) * width
        ax.bar(x + offset, days[phase].values, width, label=phase)

    ax.set_xticks(x)
    ax.set_xticklabels([d[:3] for d in days.index])
    ax.set_ylabel('Miles')
    ax.set_title(title)
    ax.legend(loc='upper left')
    ax.grid(True, axis='y', alpha=0.3)

    return fig

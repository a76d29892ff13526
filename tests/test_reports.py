"""
Tests for schedule rendering, exports and the CLI.

Run with: python -m pytest tests/test_reports.py -v
"""

import json

import pytest
import pandas as pd

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from planner.inputs import PlanRequest
from planner.schedule import generate_program_from_raw
from reports.tables import (
    format_schedule_table,
    format_paces_table,
    schedule_to_dataframe,
    export_schedule_csv,
    schedule_to_json,
    compare_phases,
    format_phase_comparison,
)
from reports.visualizations import plot_weekly_mileage, plot_phase_comparison
from main import main


@pytest.fixture
def schedule():
    return generate_program_from_raw(30, "BASE", "20:00", 6)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


# =============================================================================
# Table Tests
# =============================================================================

class TestTables:
    """Tests for text and DataFrame rendering."""

    def test_text_table(self, schedule):
        table = format_schedule_table(schedule)
        assert schedule.phase_note in table
        assert "Monday" in table
        assert "TOTAL" in table
        assert "30.0 miles" in table
        assert "0 miles" in table

    def test_paces_table(self, schedule):
        text = format_paces_table(schedule)
        assert "7:36" in text
        assert "repeat" in text

    def test_dataframe(self, schedule):
        df = schedule_to_dataframe(schedule)
        assert df.shape == (7, 5)
        assert list(df['day']) == [r.day for r in schedule.rows]
        assert df['percent'].sum() == pytest.approx(1.0, abs=1e-9)

    def test_dataframe_with_total(self, schedule):
        df = schedule_to_dataframe(schedule, include_total=True)
        assert len(df) == 8
        assert df.iloc[-1]['day'] == "TOTAL"
        assert df.iloc[:-1]['mileage'].sum() == pytest.approx(df.iloc[-1]['mileage'])

    def test_csv_export(self, schedule, tmp_path):
        path = tmp_path / "week.csv"
        export_schedule_csv(schedule, str(path))
        df = pd.read_csv(path)
        assert len(df) == 8
        assert df.iloc[-1]['day'] == "TOTAL"
        assert df.iloc[5]['mileage'] == pytest.approx(3.9)

    def test_json(self, schedule):
        payload = json.loads(schedule_to_json(schedule))
        assert len(payload['rows']) == 7
        assert payload['total']['mileage_text'] == "30.0 miles"


class TestPhaseComparison:
    """Tests for comparing phases side by side."""

    def test_columns_and_index(self):
        request = PlanRequest.from_raw(30, "BASE", "20:00", 6)
        df = compare_phases(request)
        assert list(df.columns) == ["BASE", "STRENGTH", "PEAK", "TAPER"]
        assert df.index[-1] == "TOTAL"
        assert len(df) == 8

    def test_only_taper_changes_mileage(self):
        request = PlanRequest.from_raw(30, "PEAK", "20:00", 5)
        df = compare_phases(request)
        assert (df['BASE'] == df['STRENGTH']).all()
        assert (df['BASE'] == df['PEAK']).all()
        assert df.loc['TOTAL', 'TAPER'] < df.loc['TOTAL', 'BASE']

    def test_text_report(self):
        request = PlanRequest.from_raw(30, "BASE", "20:00", 7)
        text = format_phase_comparison(compare_phases(request))
        assert "TAPER" in text
        assert "Sunday" in text


# =============================================================================
# Visualization Tests
# =============================================================================

class TestVisualizations:
    """Tests for charts."""

    def test_weekly_mileage_chart(self, schedule):
        fig = plot_weekly_mileage(schedule)
        ax = fig.axes[0]
        assert len(ax.patches) == 7
        assert ax.get_ylabel() == 'Miles'

    def test_phase_comparison_chart(self):
        request = PlanRequest.from_raw(30, "BASE", "20:00", 6)
        fig = plot_phase_comparison(compare_phases(request))
        assert len(fig.axes[0].patches) == 7 * 4


# =============================================================================
# CLI Tests
# =============================================================================

class TestCLI:
    """Tests for main.py commands."""

    def test_plan_command(self, capsys):
        assert main(['plan', '--time', '20:00', '--mileage', '30']) == 0
        out = capsys.readouterr().out
        assert "TOTAL" in out
        assert "Phase: BASE." in out

    def test_plan_json(self, capsys):
        assert main(['plan', '--time', '20:00', '--mileage', '30',
                     '--phase', 'taper', '--days', '7', '--json']) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload['phase'] == "TAPER"
        assert payload['training_days'] == 7

    def test_plan_exports(self, tmp_path, capsys):
        csv_path = tmp_path / "week.csv"
        plot_path = tmp_path / "week.png"
        assert main(['plan', '--time', '20:00', '--mileage', '30',
                     '--csv', str(csv_path), '--plot', str(plot_path)]) == 0
        assert csv_path.exists()
        assert plot_path.exists()

    def test_invalid_time_reported(self, capsys):
        assert main(['plan', '--time', 'abc', '--mileage', '30']) == 2
        captured = capsys.readouterr()
        assert "MM:SS" in captured.err
        assert "TOTAL" not in captured.out

    def test_invalid_mileage_reported(self, capsys):
        assert main(['plan', '--time', '20:00', '--mileage', '0']) == 2
        assert "TOTAL" not in capsys.readouterr().out

    def test_invalid_params_file(self, tmp_path, capsys):
        path = tmp_path / "params.json"
        path.write_text('{"bogus": 1}')
        assert main(['plan', '--time', '20:00', '--mileage', '30',
                     '--params', str(path)]) == 2
        assert "bogus" in capsys.readouterr().err

    def test_paces_command(self, capsys):
        assert main(['paces', '--time', '20:00']) == 0
        out = capsys.readouterr().out
        assert "7:36" in out
        assert "5:40" in out

    def test_compare_command(self, capsys):
        assert main(['compare', '--time', '20:00', '--mileage', '30', '--days', '5']) == 0
        assert "Phase Comparison" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

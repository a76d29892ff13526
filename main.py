#!/usr/bin/env python3
"""
5K Weekly Planner - CLI Entry Point

Usage:
    python main.py plan --time MM:SS --mileage M [--phase P] [--days D]
                        [--params FILE] [--json] [--csv FILE] [--plot FILE]
    python main.py paces --time MM:SS
    python main.py compare --time MM:SS --mileage M [--days D] [--plot FILE]
"""

import sys
import argparse
from typing import Optional, List

from planner.errors import PlanInputError, PlanConfigError
from planner.inputs import PlanRequest, TrainingPhase, SUPPORTED_TRAINING_DAYS
from planner.params import PlanParams, load_params
from planner.schedule import generate_program


def _load_params(path: Optional[str]) -> PlanParams:
    if path is None:
        return PlanParams()
    return load_params(path)


def run_plan(
    race_time: str,
    weekly_mileage: str,
    phase: str,
    training_days: str,
    params_path: Optional[str] = None,
    as_json: bool = False,
    csv_path: Optional[str] = None,
    plot_path: Optional[str] = None
):
    """Generate and print one weekly schedule."""
    from reports.tables import format_schedule_table, schedule_to_json, export_schedule_csv

    params = _load_params(params_path)
    request = PlanRequest.from_raw(
        weekly_mileage=weekly_mileage,
        phase=phase,
        race_time=race_time,
        training_days=training_days,
    )
    schedule = generate_program(request, params)

    if as_json:
        print(schedule_to_json(schedule))
    else:
        print(format_schedule_table(schedule))

    if csv_path:
        export_schedule_csv(schedule, csv_path)
        print(f"\nSchedule saved to: {csv_path}", file=sys.stderr if as_json else sys.stdout)

    if plot_path:
        from reports.visualizations import plot_weekly_mileage

        fig = plot_weekly_mileage(schedule)
        fig.savefig(plot_path, dpi=100, bbox_inches='tight')
        print(f"Chart saved to: {plot_path}", file=sys.stderr if as_json else sys.stdout)

    return schedule


def run_paces(race_time: str, params_path: Optional[str] = None):
    """Print training paces for a 5K time."""
    from planner.inputs import parse_race_time
    from planner.paces import PaceName, calculate_paces, format_paces

    params = _load_params(params_path)
    parsed = parse_race_time(race_time)
    paces = calculate_paces(parsed, params)
    formatted = format_paces(paces)

    print(f"Training paces for a {race_time} 5K (per mile):")
    print("-" * 40)
    for name in PaceName:
        print(f"  {name.value:10s}: {formatted[name]:>6s}")

    return paces


def run_comparison(
    race_time: str,
    weekly_mileage: str,
    training_days: str,
    params_path: Optional[str] = None,
    plot_path: Optional[str] = None
):
    """Compare daily mileage across all phases."""
    from reports.tables import compare_phases, format_phase_comparison

    params = _load_params(params_path)
    request = PlanRequest.from_raw(
        weekly_mileage=weekly_mileage,
        phase=TrainingPhase.BASE,
        race_time=race_time,
        training_days=training_days,
    )
    df = compare_phases(request, params)
    print(format_phase_comparison(df))

    if plot_path:
        from reports.visualizations import plot_phase_comparison

        fig = plot_phase_comparison(df)
        fig.savefig(plot_path, dpi=100, bbox_inches='tight')
        print(f"\nChart saved to: {plot_path}")

    return df


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='5K Weekly Planner')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    phases = [p.value for p in TrainingPhase]
    days = [str(d) for d in SUPPORTED_TRAINING_DAYS]

    # Plan command
    plan_parser = subparsers.add_parser('plan', help='Generate a weekly schedule')
    plan_parser.add_argument('--time', required=True, help='5K time as MM:SS')
    plan_parser.add_argument('--mileage', required=True, help='Target weekly mileage')
    plan_parser.add_argument('--phase', default='BASE', help=f"Training phase ({', '.join(phases)})")
    plan_parser.add_argument('--days', default='6', help=f"Training days ({', '.join(days)})")
    plan_parser.add_argument('--params', help='JSON file with plan parameters')
    plan_parser.add_argument('--json', action='store_true', help='Print JSON instead of a table')
    plan_parser.add_argument('--csv', help='Write the schedule to a CSV file')
    plan_parser.add_argument('--plot', help='Save a mileage chart (PNG, PDF, ...)')

    # Paces command
    paces_parser = subparsers.add_parser('paces', help='Show training paces')
    paces_parser.add_argument('--time', required=True, help='5K time as MM:SS')
    paces_parser.add_argument('--params', help='JSON file with plan parameters')

    # Compare command
    cmp_parser = subparsers.add_parser('compare', help='Compare mileage across phases')
    cmp_parser.add_argument('--time', required=True, help='5K time as MM:SS')
    cmp_parser.add_argument('--mileage', required=True, help='Target weekly mileage')
    cmp_parser.add_argument('--days', default='6', help=f"Training days ({', '.join(days)})")
    cmp_parser.add_argument('--params', help='JSON file with plan parameters')
    cmp_parser.add_argument('--plot', help='Save a comparison chart')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == 'plan':
            run_plan(args.time, args.mileage, args.phase, args.days,
                     params_path=args.params, as_json=args.json,
                     csv_path=args.csv, plot_path=args.plot)
        elif args.command == 'paces':
            run_paces(args.time, params_path=args.params)
        elif args.command == 'compare':
            run_comparison(args.time, args.mileage, args.days,
                           params_path=args.params, plot_path=args.plot)
        else:
            parser.print_help()
    except (PlanInputError, PlanConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())

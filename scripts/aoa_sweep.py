#!/usr/bin/env python3
"""
Angle of Attack (AoA) Sweep Tools

CFD 받음각 스윕 보조 스크립트:
- journal : generate the solver journal for a sweep
- reduce  : reduce one force/moment sample (optionally append to the ledger)
- summary : print a summary of a results ledger
- demo    : run a full sweep against the analytic thin-airfoil model

Usage:
    python aoa_sweep.py journal -5 15 0.5 --iterations 400 -o sweep.jou
    python aoa_sweep.py reduce 4.0 --force 0.8 12.1 0 --moment 0 0 -1.3
    python aoa_sweep.py summary aoa_results.txt
    python aoa_sweep.py demo -5 10 2.5 --workdir output/demo

Example:
    python aoa_sweep.py --config configs/wing.yaml journal 0 12 1
"""

import argparse
import logging
import sys
from pathlib import Path

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from aerosweep import (
    AeroConfig,
    AeroSweepError,
    AoAStore,
    ResultsLedger,
    SweepDriver,
    SweepPlan,
    SweepSession,
    load_results,
    reduce,
    summarize,
    write_journal,
)
from aerosweep.collaborators import RecordingSolver, ThinAirfoilIntegrator


def load_config(args) -> AeroConfig:
    if args.config:
        return AeroConfig.from_yaml(args.config)
    return AeroConfig().checked()


def print_summary(summary: dict):
    print(f"\n{'='*70}")
    print("RESULTS SUMMARY")
    print(f"{'='*70}")
    print(f"Total points computed: {summary['points']}")
    if summary['points'] == 0:
        print(f"{'='*70}")
        return

    print(f"\nAoA range:  {summary['aoa_min']:.2f}° to {summary['aoa_max']:.2f}°")
    print(f"Cl range:   {summary['cl_min']:.4f} to {summary['cl_max']:.4f}")
    print(f"Cd range:   {summary['cd_min']:.6f} to {summary['cd_max']:.6f}")
    if summary['ld_max'] is not None:
        print(f"L/D max:    {summary['ld_max']:.2f} at α={summary['ld_max_aoa']:.2f}°")
    print(f"{'='*70}")


def cmd_journal(args) -> int:
    config = load_config(args)
    plan = SweepPlan.from_range(args.aoa_min, args.aoa_max, args.d_aoa,
                                iterations=args.iterations,
                                udf_library=args.library)
    output = write_journal(plan, config, args.output,
                           initialize=args.initialize, case_file=args.case)

    print("="*70)
    print("AoA SWEEP JOURNAL")
    print("="*70)
    print(f"AoA range:      {args.aoa_min}° to {args.aoa_max}° (Δα = {args.d_aoa}°)")
    print(f"Points:         {len(plan)}")
    print(f"Iterations:     {plan.iterations} per point")
    print(f"AoA file:       {config.aoa_file}")
    print(f"Results file:   {config.results_file}")
    print(f"✓ Journal saved: {output}")
    print("="*70)
    return 0


def cmd_reduce(args) -> int:
    config = load_config(args)
    row = reduce(args.aoa, args.force, args.moment, config)

    for label, value in zip(row.HEADER, row.values()):
        print(f"  {label:<10} {value:>14.6g}")
    if row.degenerate:
        print("\n⚠ Degenerate reference product: coefficients clamped to 0")

    if args.append:
        path = ResultsLedger(args.append).append(row)
        print(f"\n✓ Row appended: {path}")
    return 0


def cmd_summary(args) -> int:
    df = load_results(args.ledger)
    print_summary(summarize(df))

    if args.csv:
        df.to_csv(args.csv, index=False)
        print(f"\n✓ CSV data saved: {args.csv}")
    return 0


def cmd_demo(args) -> int:
    config = load_config(args)
    workdir = Path(args.workdir)
    workdir.mkdir(parents=True, exist_ok=True)

    store = AoAStore(workdir / config.aoa_file, strict=config.strict_aoa)
    ledger = ResultsLedger(workdir / config.results_file)
    integrator = ThinAirfoilIntegrator(
        store,
        surface=config.surface,
        speed=config.freestream_speed,
        density=config.density,
        reference_area=config.reference_area,
        reference_length=config.reference_length,
    )
    session = SweepSession(config, integrator, store=store, ledger=ledger)
    solver = RecordingSolver(session.inlet_profile())

    plan = SweepPlan.from_range(args.aoa_min, args.aoa_max, args.d_aoa,
                                iterations=args.iterations)
    outcomes = SweepDriver(session, solver, plan).run()

    print_summary(summarize(load_results(ledger.path)))
    return 0 if all(o.ok for o in outcomes) else 1


def add_range_arguments(parser):
    parser.add_argument('aoa_min', type=float, help='Minimum angle of attack (degrees)')
    parser.add_argument('aoa_max', type=float, help='Maximum angle of attack (degrees)')
    parser.add_argument('d_aoa', type=float, help='AoA increment (degrees)')
    parser.add_argument('--iterations', '-i', type=int, default=500,
                       help='Solver iterations per angle (default: 500)')


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="AoA sweep journal generation and force reduction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python aoa_sweep.py journal -5 15 0.5 -o sweep.jou
  python aoa_sweep.py reduce 4.0 --force 0.8 12.1 0 --moment 0 0 -1.3
  python aoa_sweep.py summary aoa_results.txt --csv polar.csv
  python aoa_sweep.py demo -5 10 2.5
"""
    )
    parser.add_argument('--config', '-c', type=str, default=None,
                       help='YAML configuration file (default: built-in values)')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    p_journal = subparsers.add_parser('journal', help='Generate sweep journal')
    add_range_arguments(p_journal)
    p_journal.add_argument('--output', '-o', type=str, default='aoa_sweep.jou',
                          help='Journal file (default: aoa_sweep.jou)')
    p_journal.add_argument('--library', type=str, default='libudf',
                          help='Compiled UDF library name (default: libudf)')
    p_journal.add_argument('--case', type=str, default=None,
                          help='Case/data file to read first')
    p_journal.add_argument('--initialize', action='store_true',
                          help='Initialize the flow before the first angle')
    p_journal.set_defaults(func=cmd_journal)

    p_reduce = subparsers.add_parser('reduce', help='Reduce one force/moment sample')
    p_reduce.add_argument('aoa', type=float, help='Angle of attack (degrees)')
    p_reduce.add_argument('--force', type=float, nargs=3, required=True,
                         metavar=('FX', 'FY', 'FZ'))
    p_reduce.add_argument('--moment', type=float, nargs=3, default=[0.0, 0.0, 0.0],
                         metavar=('MX', 'MY', 'MZ'))
    p_reduce.add_argument('--append', type=str, default=None,
                         help='Append the row to this ledger file')
    p_reduce.set_defaults(func=cmd_reduce)

    p_summary = subparsers.add_parser('summary', help='Summarize a results ledger')
    p_summary.add_argument('ledger', type=str, help='Results ledger file')
    p_summary.add_argument('--csv', type=str, default=None,
                          help='Also save the table as CSV')
    p_summary.set_defaults(func=cmd_summary)

    p_demo = subparsers.add_parser('demo', help='Sweep against the analytic model')
    add_range_arguments(p_demo)
    p_demo.add_argument('--workdir', type=str, default='output/demo',
                       help='Directory for the AoA and results files')
    p_demo.set_defaults(func=cmd_demo)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        return args.func(args)
    except (AeroSweepError, FileNotFoundError, ValueError) as e:
        print(f"✗ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

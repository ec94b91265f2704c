#!/usr/bin/env python3
"""
AoA Sweep Demo

해석 모델(thin airfoil)로 전체 스윕 파이프라인을 시연합니다.
"""

import logging
import sys
import tempfile
from pathlib import Path

# Add repository root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aerosweep import (
    AeroConfig, AoAStore, ResultsLedger,
    SweepDriver, SweepPlan, SweepSession, load_results, render_journal, summarize,
    velocity_components
)
from aerosweep.collaborators import RecordingSolver, ThinAirfoilIntegrator


def main():
    logging.basicConfig(level=logging.WARNING)

    config_file = Path(__file__).parent.parent / "configs" / "wing.yaml"
    config = AeroConfig.from_yaml(config_file)
    plan = SweepPlan.from_yaml(config_file)

    print("="*70)
    print("AoA SWEEP DEMO")
    print("="*70)
    print(f"U∞ = {config.freestream_speed} m/s, ρ = {config.density} kg/m³")
    print(f"Aref = {config.reference_area} m², Lref = {config.reference_length} m")
    print(f"q = {config.dynamic_pressure:.3f} Pa")
    print(f"Angles: {plan.aoa_values}")
    print()

    print("1. Generated journal (first angle)")
    print("-"*70)
    journal = render_journal(plan, config).split("\n")
    for line in journal[:10]:
        print(f"  {line}")
    print()

    with tempfile.TemporaryDirectory() as workdir:
        store = AoAStore(Path(workdir) / config.aoa_file)
        ledger = ResultsLedger(Path(workdir) / config.results_file)
        integrator = ThinAirfoilIntegrator(store, surface=config.surface)
        session = SweepSession(config, integrator, store=store, ledger=ledger)
        solver = RecordingSolver(session.inlet_profile())
        outcomes = SweepDriver(session, solver, plan).run()

        print("2. Sweep results")
        print("-"*70)
        print(f"  {'AoA':>8} {'U':>9} {'V':>9} {'Cl':>9} {'Cd':>9} {'L/D':>8}")
        for outcome in outcomes:
            row = outcome.row
            u, v = velocity_components(row.aoa, config.freestream_speed)
            print(f"  {row.aoa:>8.1f} {u:>9.3f} {v:>9.3f} "
                  f"{row.cl:>9.4f} {row.cd:>9.5f} {row.lift_to_drag:>8.2f}")

        summary = summarize(load_results(ledger.path))

    print()
    print("="*70)
    print("DEMO COMPLETE")
    print("="*70)
    print(f"  Points:  {summary['points']}")
    print(f"  L/D max: {summary['ld_max']:.2f} at α={summary['ld_max_aoa']:.1f}°")
    print()
    print("Usage:")
    print("  python scripts/aoa_sweep.py --config configs/wing.yaml journal -4 12 2")
    print()


if __name__ == "__main__":
    main()

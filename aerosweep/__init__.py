"""
AoA Sweep Post-processing

CFD 받음각 스윕 자동화: inlet velocity profiles, force reduction, results ledger

Usage:
    from aerosweep import AeroConfig, SweepSession, reduce

    config = AeroConfig.from_yaml("configs/wing.yaml")

    # Pure reduction of one force/moment sample
    row = reduce(5.0, (1.2, 18.4, 0.0), (0.0, 0.0, -0.9), config)
    print(row.cd, row.cl)

    # On-demand step against a solver-provided force integrator
    session = SweepSession(config, integrator)
    outcome = session.compute_forces_and_write()
"""

from .aoa_store import AoAReading, AoAStore
from .config import AeroConfig
from .errors import (
    AeroSweepError,
    AoAStoreError,
    ConfigError,
    LedgerWriteError,
    SurfaceNotFoundError,
)
from .ledger import ResultsLedger, load_results, summarize
from .profiles import InletVelocityProfile, velocity_components
from .reduction import ResultRow, dynamic_pressure, reduce, wind_axes
from .session import ReductionOutcome, SweepSession
from .driver import SweepDriver, SweepPlan, run_sweep
from .journal import render_journal, write_journal


# Version info
__version__ = "1.0.0"
__all__ = [
    'AeroConfig',
    'AoAReading',
    'AoAStore',
    'AeroSweepError',
    'AoAStoreError',
    'ConfigError',
    'LedgerWriteError',
    'SurfaceNotFoundError',
    'ResultsLedger',
    'load_results',
    'summarize',
    'InletVelocityProfile',
    'velocity_components',
    'ResultRow',
    'dynamic_pressure',
    'reduce',
    'wind_axes',
    'ReductionOutcome',
    'SweepSession',
    'SweepDriver',
    'SweepPlan',
    'run_sweep',
    'render_journal',
    'write_journal',
]

"""
Sweep Driver

받음각 스윕 실행기
For each angle: write the AoA store, re-apply the inlet profiles, iterate,
then run the on-demand reduction. No retries; failures are recorded and the
sweep continues unless stop_on_error is set.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Union

import numpy as np
import yaml

from .collaborators import SolverBackend
from .errors import ConfigError
from .session import ReductionOutcome, SweepSession

logger = logging.getLogger(__name__)


@dataclass
class SweepPlan:
    """Angles to run and solver pacing"""
    aoa_values: List[float] = field(default_factory=list)
    iterations: int = 500
    udf_library: str = "libudf"
    on_demand: str = "compute_forces_and_write"

    def __post_init__(self):
        self.aoa_values = [float(a) for a in self.aoa_values]
        try:
            self.iterations = int(self.iterations)
        except (TypeError, ValueError):
            raise ConfigError([f"iterations must be an integer, got {self.iterations!r}"]) from None
        if self.iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {self.iterations}")

    def __len__(self) -> int:
        return len(self.aoa_values)

    @classmethod
    def from_range(cls, start: float, stop: float, step: float, **kwargs) -> 'SweepPlan':
        """Inclusive range (start, stop, step) in degrees"""
        if step == 0:
            raise ValueError("step must be non-zero")
        if (stop - start) * step < 0:
            raise ValueError(f"step {step} does not move from {start} towards {stop}")

        alphas = np.arange(start, stop + step / 2, step)
        return cls(aoa_values=[round(float(a), 10) for a in alphas], **kwargs)

    @classmethod
    def from_dict(cls, data: dict) -> 'SweepPlan':
        """
        Build from a 'sweep' mapping

        Either 'aoa' (list of angles) or 'range' ([start, stop, step]) is required.
        """
        options = {key: data[key] for key in ('iterations', 'udf_library', 'on_demand') if key in data}

        if 'aoa' in data:
            return cls(aoa_values=list(data['aoa']), **options)
        if 'range' in data:
            bounds = data['range']
            if len(bounds) != 3:
                raise ConfigError([f"sweep.range must be [start, stop, step], got {bounds}"])
            return cls.from_range(*(float(b) for b in bounds), **options)

        raise ConfigError(["sweep section needs 'aoa' or 'range'"])

    @classmethod
    def from_yaml(cls, filepath: Union[str, Path]) -> 'SweepPlan':
        path = Path(filepath)
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if 'sweep' not in data:
            raise ConfigError(["missing 'sweep' section"], str(path))
        return cls.from_dict(data['sweep'])


class SweepDriver:
    """Runs a SweepPlan against a solver backend and a session"""

    def __init__(self,
                 session: SweepSession,
                 solver: SolverBackend,
                 plan: SweepPlan,
                 stop_on_error: bool = False):
        self.session = session
        self.solver = solver
        self.plan = plan
        self.stop_on_error = stop_on_error

    def run_point(self, aoa: float) -> ReductionOutcome:
        """Single sweep angle"""
        self.session.store.write(aoa)
        self.solver.apply_inlet_profiles()
        self.solver.iterate(self.plan.iterations)
        return self.session.compute_forces_and_write()

    def run(self) -> List[ReductionOutcome]:
        outcomes = []
        n_points = len(self.plan)

        for i, aoa in enumerate(self.plan.aoa_values, start=1):
            logger.info(f"[{i}/{n_points}] AoA = {aoa:g} deg, {self.plan.iterations} iterations")
            outcome = self.run_point(aoa)
            outcomes.append(outcome)

            if not outcome.ok:
                logger.error(f"AoA = {aoa:g} deg failed: {outcome.error}")
                if self.stop_on_error:
                    break

        n_ok = sum(1 for o in outcomes if o.ok)
        logger.info(f"Sweep finished: {n_ok}/{n_points} points reduced")
        return outcomes


def run_sweep(session: SweepSession,
              solver: SolverBackend,
              aoa_values: Sequence[float],
              iterations: int = 500,
              stop_on_error: bool = False) -> List[ReductionOutcome]:
    """Convenience wrapper around SweepDriver"""
    plan = SweepPlan(aoa_values=list(aoa_values), iterations=iterations)
    return SweepDriver(session, solver, plan, stop_on_error=stop_on_error).run()

"""
Sweep Session

On-demand 후처리 단계 (AoA 읽기 -> force integration -> 계수 계산 -> ledger 기록)

State that used to be process-wide (last known AoA, header-written flag)
lives on the session, scoped to one sweep-driver run.

Usage:
    from aerosweep import AeroConfig, SweepSession
    from aerosweep.collaborators import StaticForceIntegrator

    session = SweepSession(config, integrator)
    outcome = session.compute_forces_and_write()
    if not outcome.ok:
        print(outcome.error)
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .aoa_store import AoAReading, AoAStore
from .collaborators import ForceIntegrator
from .config import AeroConfig
from .errors import SurfaceNotFoundError
from .ledger import ResultsLedger
from .profiles import InletVelocityProfile
from .reduction import ResultRow, reduce

logger = logging.getLogger(__name__)


@dataclass
class ReductionOutcome:
    """Result of one on-demand reduction"""
    aoa: float
    row: Optional[ResultRow] = None
    status: int = 0
    error: Optional[str] = None
    aoa_stale: bool = False

    @property
    def ok(self) -> bool:
        return self.status == 0


class SweepSession:
    """Explicit state for one sweep: store, ledger, last AoA, outcomes"""

    def __init__(self,
                 config: AeroConfig,
                 integrator: ForceIntegrator,
                 store: Optional[AoAStore] = None,
                 ledger: Optional[ResultsLedger] = None):
        self.config = config
        self.integrator = integrator
        self.store = store if store is not None else AoAStore(config.aoa_file, strict=config.strict_aoa)
        self.ledger = ledger if ledger is not None else ResultsLedger(config.results_file)
        self.last_aoa = 0.0
        self.outcomes: List[ReductionOutcome] = []

    @property
    def header_written(self) -> bool:
        return self.ledger.header_written

    @property
    def fallback_count(self) -> int:
        return self.store.fallback_count

    def read_aoa(self) -> AoAReading:
        """Fresh AoA read, falling back to the session's last known angle"""
        reading = self.store.read(last_known=self.last_aoa)
        self.last_aoa = reading.value
        return reading

    def inlet_profile(self) -> InletVelocityProfile:
        """Inlet profile pair sharing this session's last known angle"""
        return InletVelocityProfile(self.store, self.config.freestream_speed, session=self)

    def compute_forces_and_write(self) -> ReductionOutcome:
        """
        Reduce the current surface loads and append one ledger row

        Returns:
        --------
        ReductionOutcome (status=1 and no row when the surface is unknown)

        Raises:
        -------
        LedgerWriteError if the ledger cannot be written
        AoAStoreError in strict mode when the AoA file is unusable
        """
        reading = self.read_aoa()

        try:
            force, moment = self.integrator.compute_force_and_moment(
                self.config.surface, self.config.reference_point)
        except SurfaceNotFoundError as e:
            logger.error(f"{e}; check the configured surface identifier")
            outcome = ReductionOutcome(aoa=reading.value, status=1, error=str(e),
                                       aoa_stale=reading.stale)
            self.outcomes.append(outcome)
            return outcome

        row = reduce(reading.value, force, moment, self.config)
        self.ledger.append(row)
        logger.info(row.message())

        outcome = ReductionOutcome(aoa=reading.value, row=row, aoa_stale=reading.stale)
        self.outcomes.append(outcome)
        return outcome

    @property
    def rows(self) -> List[ResultRow]:
        return [o.row for o in self.outcomes if o.row is not None]

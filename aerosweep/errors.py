"""
AeroSweep Exceptions

스윕 파이프라인 예외 정의
"""

from typing import List, Optional


class AeroSweepError(Exception):
    """Base class for all sweep pipeline errors"""


class ConfigError(AeroSweepError):
    """Invalid aerodynamic configuration"""

    def __init__(self, errors: List[str], source: Optional[str] = None):
        self.errors = list(errors)
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Invalid configuration{where}: " + "; ".join(self.errors))


class AoAStoreError(AeroSweepError):
    """AoA file missing or unparsable (strict mode only)"""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"AoA store {path}: {reason}")


class SurfaceNotFoundError(AeroSweepError):
    """Force integration requested for an unknown surface"""

    def __init__(self, surface):
        self.surface = surface
        super().__init__(f"Surface {surface!r} not found")


class LedgerWriteError(AeroSweepError):
    """Results ledger destination could not be written"""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write results ledger {path}: {cause}")

"""
AoA Store

현재 받음각(deg)을 파일로 주고받는 저장소
- Sweep driver writes the angle before each solver pass
- Profile callbacks and the on-demand reduction re-read it on every call
- Missing/malformed file falls back to the last known value (or raises in strict mode)

Usage:
    from aerosweep.aoa_store import AoAStore

    store = AoAStore("aoa.txt")
    store.write(-5.0)
    reading = store.read(last_known=0.0)
    if reading.stale:
        print(reading.reason)
"""

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import AoAStoreError

logger = logging.getLogger(__name__)

# Leading decimal number of a token, as scanf("%lf") reads it
NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class AoAReading:
    """Result of one AoA store read"""
    value: float
    stale: bool = False
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value: float) -> 'AoAReading':
        return cls(value=value)

    @classmethod
    def stale_fallback(cls, last_value: float, reason: str) -> 'AoAReading':
        return cls(value=last_value, stale=True, reason=reason)


def parse_aoa(text: str) -> float:
    """
    Parse the first whitespace-delimited token as an angle in degrees

    Only the leading number of the token is used ("12deg" -> 12.0).
    Raises ValueError for empty, non-numeric or non-finite content.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("empty file")

    match = NUMBER_PREFIX.match(tokens[0])
    if match is None:
        raise ValueError(f"no number in {tokens[0]!r}")

    value = float(match.group(0))
    if not math.isfinite(value):
        raise ValueError(f"non-finite value {tokens[0]!r}")
    return value


class AoAStore:
    """Single persisted AoA scalar exchanged through a text file"""

    def __init__(self, path: Union[str, Path] = "aoa.txt", strict: bool = False):
        self.path = Path(path)
        self.strict = strict
        self.fallback_count = 0

    def exists(self) -> bool:
        return self.path.is_file()

    def write(self, aoa: float) -> Path:
        """Persist the angle; repr keeps the value exact on read-back"""
        value = float(aoa)
        if not math.isfinite(value):
            raise ValueError(f"AoA must be finite, got {aoa}")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            f.write(f"{value!r}\n")
        return self.path

    def read(self, last_known: float = 0.0) -> AoAReading:
        """
        Read the current AoA

        Parameters:
        -----------
        last_known : float
            Value returned when the file is missing or malformed (non-strict)

        Returns:
        --------
        AoAReading (stale=True when the fallback was used)
        """
        try:
            with open(self.path, 'r', encoding='ascii') as f:
                text = f.read()
        except UnicodeDecodeError as e:
            return self._fallback(last_known, f"malformed content: {e.reason} at byte {e.start}")
        except FileNotFoundError:
            return self._fallback(last_known, "file not found")
        except OSError as e:
            return self._fallback(last_known, f"unreadable ({e})")

        try:
            value = parse_aoa(text)
        except ValueError as e:
            return self._fallback(last_known, f"malformed content: {e}")

        return AoAReading.ok(value)

    def read_aoa(self, last_known: float = 0.0) -> float:
        return self.read(last_known).value

    def _fallback(self, last_known: float, reason: str) -> AoAReading:
        if self.strict:
            raise AoAStoreError(self.path, reason)

        self.fallback_count += 1
        logger.warning(f"AoA store {self.path}: {reason}; keeping last value {last_known:g} deg")
        return AoAReading.stale_fallback(last_known, reason)

"""
Inlet Velocity Profiles

받음각에 따른 inlet 속도 성분 (U, V) 계산
Spatially uniform: every face of the inlet receives the same value.
"""

import logging
from typing import Tuple, Union

import numpy as np

from .aoa_store import AoAStore

logger = logging.getLogger(__name__)


def velocity_components(aoa_deg: float, speed: float) -> Tuple[float, float]:
    """
    Freestream velocity components for a given angle of attack

    Parameters:
    -----------
    aoa_deg : float
        Angle of attack (degrees)
    speed : float
        Freestream speed (m/s)

    Returns:
    --------
    Tuple[float, float]: (U, V)
    """
    a_rad = np.deg2rad(aoa_deg)
    return float(speed * np.cos(a_rad)), float(speed * np.sin(a_rad))


def fill_uniform(faces: Union[np.ndarray, int], value: float) -> np.ndarray:
    """Assign one scalar to every face; an int allocates a new array of that size"""
    if isinstance(faces, (int, np.integer)):
        if faces < 0:
            raise ValueError(f"Face count must be non-negative, got {faces}")
        return np.full(int(faces), value, dtype=float)

    faces[...] = value
    return faces


class InletVelocityProfile:
    """
    Boundary profile pair driven by the AoA store

    Each call re-reads the store, so a new angle written between two
    boundary applications is picked up without explicit invalidation.
    When attached to a SweepSession, reads go through the session so the
    profile and the force reduction share one last known angle.
    """

    def __init__(self, store: AoAStore, speed: float = 16.0, session=None):
        self.store = store
        self.speed = speed
        self.session = session
        self._last_aoa = 0.0

    @property
    def last_aoa(self) -> float:
        if self.session is not None:
            return self.session.last_aoa
        return self._last_aoa

    def current_components(self) -> Tuple[float, float]:
        if self.session is not None:
            reading = self.session.read_aoa()
        else:
            reading = self.store.read(last_known=self._last_aoa)
            self._last_aoa = reading.value
        u, v = velocity_components(reading.value, self.speed)
        logger.debug(f"Inlet profile at AoA={reading.value:g} deg: U={u:g} V={v:g}")
        return u, v

    def u_profile(self, faces: Union[np.ndarray, int]) -> np.ndarray:
        """X-direction velocity on the inlet"""
        u, _ = self.current_components()
        return fill_uniform(faces, u)

    def v_profile(self, faces: Union[np.ndarray, int]) -> np.ndarray:
        """Y-direction velocity on the inlet"""
        _, v = self.current_components()
        return fill_uniform(faces, v)

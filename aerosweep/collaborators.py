"""
Solver Collaborator Interfaces

CFD 솔버 측 기능 인터페이스 (force integration, boundary application, iteration)
and in-memory stand-ins used when no solver is attached.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Sequence, Tuple, Union

import numpy as np

from .aoa_store import AoAStore
from .errors import SurfaceNotFoundError

Vector3 = np.ndarray
ForceMoment = Tuple[Vector3, Vector3]
SurfaceEntry = Union[Tuple[Sequence[float], Sequence[float]], Callable[[], Tuple]]


class ForceIntegrator(ABC):
    """Surface force/moment integration provided by the solver"""

    @abstractmethod
    def compute_force_and_moment(self, surface, reference_point: Sequence[float]) -> ForceMoment:
        """
        Net force and moment on a surface

        Parameters:
        -----------
        surface : int or str
            Face-zone id or zone name
        reference_point : sequence of 3 floats
            Moment reference point

        Returns:
        --------
        Tuple[np.ndarray, np.ndarray]: (force, moment)

        Raises:
        -------
        SurfaceNotFoundError for an unknown surface
        """
        pass


class SolverBackend(ABC):
    """Boundary-condition application and iteration provided by the solver"""

    @abstractmethod
    def apply_inlet_profiles(self):
        """Re-evaluate the inlet velocity profiles"""
        pass

    @abstractmethod
    def iterate(self, n_iterations: int):
        """Run solver iterations"""
        pass


class StaticForceIntegrator(ForceIntegrator):
    """
    In-memory integrator with fixed (or callable) force/moment per surface

    Moments are returned as given; the reference point is recorded only.
    """

    def __init__(self, surfaces: Dict[Union[int, str], SurfaceEntry]):
        self.surfaces = dict(surfaces)
        self.calls = []

    def compute_force_and_moment(self, surface, reference_point) -> ForceMoment:
        if surface not in self.surfaces:
            raise SurfaceNotFoundError(surface)

        self.calls.append((surface, tuple(float(x) for x in reference_point)))
        entry = self.surfaces[surface]
        force, moment = entry() if callable(entry) else entry
        return np.asarray(force, dtype=float), np.asarray(moment, dtype=float)


class ThinAirfoilIntegrator(ForceIntegrator):
    """
    Analytic force model driven by the AoA store

    Thin-airfoil lift (Cl = 2 pi alpha) with a parabolic drag polar,
    rotated back into body axes so the reduction recovers Cl and Cd.
    """

    def __init__(self,
                 store: AoAStore,
                 surface: Union[int, str] = 5,
                 speed: float = 16.0,
                 density: float = 1.225,
                 reference_area: float = 0.4,
                 reference_length: float = 0.435,
                 cd0: float = 0.01,
                 k: float = 0.02,
                 cm: float = -0.05):
        self.store = store
        self.surface = surface
        self.q_area = 0.5 * density * speed ** 2 * reference_area
        self.reference_length = reference_length
        self.cd0 = cd0
        self.k = k
        self.cm = cm
        self.last_aoa = 0.0

    def coefficients(self, aoa_deg: float) -> Tuple[float, float]:
        """(Cl, Cd) at the given angle"""
        cl = 2.0 * np.pi * np.deg2rad(aoa_deg)
        cd = self.cd0 + self.k * cl ** 2
        return float(cl), float(cd)

    def compute_force_and_moment(self, surface, reference_point) -> ForceMoment:
        if surface != self.surface:
            raise SurfaceNotFoundError(surface)

        self.last_aoa = self.store.read_aoa(last_known=self.last_aoa)
        cl, cd = self.coefficients(self.last_aoa)
        drag, lift = cd * self.q_area, cl * self.q_area

        a_rad = np.deg2rad(self.last_aoa)
        fx = drag * np.cos(a_rad) - lift * np.sin(a_rad)
        fy = drag * np.sin(a_rad) + lift * np.cos(a_rad)

        force = np.array([fx, fy, 0.0])
        moment = np.array([0.0, 0.0, self.cm * self.q_area * self.reference_length])
        return force, moment


class RecordingSolver(SolverBackend):
    """Solver stand-in that evaluates the inlet profiles and counts iterations"""

    def __init__(self, profile=None, n_inlet_faces: int = 8):
        self.profile = profile
        self.n_inlet_faces = n_inlet_faces
        self.inlet_u = np.zeros(n_inlet_faces)
        self.inlet_v = np.zeros(n_inlet_faces)
        self.iterations = 0
        self.history = []

    def apply_inlet_profiles(self):
        if self.profile is not None:
            self.profile.u_profile(self.inlet_u)
            self.profile.v_profile(self.inlet_v)
        self.history.append(('apply', float(self.inlet_u[0]) if self.n_inlet_faces else 0.0))

    def iterate(self, n_iterations: int):
        if n_iterations < 0:
            raise ValueError(f"Iteration count must be non-negative, got {n_iterations}")
        self.iterations += n_iterations
        self.history.append(('iterate', n_iterations))

"""
Force Reduction

힘/모멘트 벡터 -> 항력, 양력, 공력 계수 변환

Steps:
1. Rotate (Fx, Fy) into wind axes by the angle of attack
   Fd =  Fx cos(a) + Fy sin(a)
   Fl = -Fx sin(a) + Fy cos(a)
2. q = 0.5 * rho * U^2
3. Cd, Cl = F / (q * Aref);  Cm = M / (q * Aref * Lref)

Degenerate denominators clamp the affected coefficients to 0 and set
ResultRow.degenerate instead of raising.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Sequence, Tuple

import numpy as np

from .config import AeroConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultRow:
    """One sweep sample (14 ledger fields + degenerate flag)"""
    aoa: float
    fx: float
    fy: float
    fz: float
    fd: float
    fl: float
    cd: float
    cl: float
    mx: float
    my: float
    mz: float
    cmx: float
    cmy: float
    cmz: float
    degenerate: bool = False

    # Ledger column order and labels
    FIELDS = ('aoa', 'fx', 'fy', 'fz', 'fd', 'fl', 'cd', 'cl',
              'mx', 'my', 'mz', 'cmx', 'cmy', 'cmz')
    HEADER = ('AoA_deg', 'Fx[N]', 'Fy[N]', 'Fz[N]', 'Fd[N]', 'Fl[N]', 'Cd', 'Cl',
              'Mx[Nm]', 'My[Nm]', 'Mz[Nm]', 'Cmx', 'Cmy', 'Cmz')

    def values(self) -> Tuple[float, ...]:
        """Ledger values in column order"""
        return tuple(getattr(self, name) for name in self.FIELDS)

    def as_dict(self) -> Dict:
        return asdict(self)

    @property
    def lift_to_drag(self) -> float:
        return self.cl / self.cd if self.cd != 0 else 0.0

    def message(self) -> str:
        """Single-line summary, same layout as the solver console message"""
        return (f"AoA {self.aoa:g} deg: Fx={self.fx:g} Fy={self.fy:g} Fz={self.fz:g} "
                f"Fd={self.fd:g} Fl={self.fl:g} Cd={self.cd:g} Cl={self.cl:g} | "
                f"Mx={self.mx:g} My={self.my:g} Mz={self.mz:g} "
                f"Cmx={self.cmx:g} Cmy={self.cmy:g} Cmz={self.cmz:g}")


def _vector3(vec: Sequence[float], name: str) -> np.ndarray:
    arr = np.asarray(vec, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got {arr.size}")
    return arr


def dynamic_pressure(density: float, speed: float) -> float:
    """q = 0.5 * rho * U^2"""
    return 0.5 * density * speed * speed


def wind_axes(aoa_deg: float, fx: float, fy: float) -> Tuple[float, float]:
    """
    Drag/lift decomposition (2D rotation of the force into wind axes)

    Assumes the freestream lies in the X-Y plane with Z spanwise.

    Returns:
    --------
    Tuple[float, float]: (Fd, Fl)
    """
    a_rad = aoa_deg * np.pi / 180.0
    c, s = np.cos(a_rad), np.sin(a_rad)
    fd = fx * c + fy * s
    fl = -fx * s + fy * c
    return float(fd), float(fl)


def reduce(aoa_deg: float,
           force: Sequence[float],
           moment: Sequence[float],
           config: AeroConfig) -> ResultRow:
    """
    Reduce raw force/moment vectors to drag, lift and coefficients

    Parameters:
    -----------
    aoa_deg : float
        Angle of attack (degrees)
    force : sequence of 3 floats
        (Fx, Fy, Fz) on the target surface [N]
    moment : sequence of 3 floats
        (Mx, My, Mz) about the reference point [N m]
    config : AeroConfig
        Freestream and reference quantities

    Returns:
    --------
    ResultRow
    """
    fx, fy, fz = _vector3(force, "force")
    mx, my, mz = _vector3(moment, "moment")

    fd, fl = wind_axes(aoa_deg, fx, fy)

    q_area = dynamic_pressure(config.density, config.freestream_speed) * config.reference_area
    q_area_length = q_area * config.reference_length
    degenerate = False

    if q_area != 0.0:
        cd = fd / q_area
        cl = fl / q_area
    else:
        cd = cl = 0.0
        degenerate = True

    if q_area_length != 0.0:
        cmx = mx / q_area_length
        cmy = my / q_area_length
        cmz = mz / q_area_length
    else:
        cmx = cmy = cmz = 0.0
        degenerate = True

    if degenerate:
        logger.warning(f"Degenerate reference product at AoA={aoa_deg:g} deg "
                       f"(q*Aref={q_area:g}, q*Aref*Lref={q_area_length:g}); "
                       f"coefficients clamped to 0")

    return ResultRow(
        aoa=float(aoa_deg),
        fx=float(fx), fy=float(fy), fz=float(fz),
        fd=fd, fl=fl,
        cd=float(cd), cl=float(cl),
        mx=float(mx), my=float(my), mz=float(mz),
        cmx=float(cmx), cmy=float(cmy), cmz=float(cmz),
        degenerate=degenerate,
    )

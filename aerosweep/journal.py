"""
Journal Generation

Fluent TUI journal 생성 (스윕 제어 스크립트)

For every angle the journal overwrites the AoA file from Scheme, iterates
(the inlet profiles are re-evaluated by the solver each iteration) and then
executes the on-demand reduction compiled into the UDF library.
"""

from pathlib import Path
from typing import List, Union

from .config import AeroConfig
from .driver import SweepPlan


def _scheme_string(text: str) -> str:
    return '"' + text.replace('\\', '\\\\').replace('"', '\\"') + '"'


def write_aoa_command(aoa: float, aoa_file: str) -> str:
    """Scheme expression that overwrites the AoA file with one value"""
    return (f"(let ((p (open-output-file {_scheme_string(aoa_file)}))) "
            f"(display {float(aoa)!r} p) (newline p) (close-output-port p))")


def render_journal(plan: SweepPlan,
                   config: AeroConfig,
                   initialize: bool = False,
                   case_file: str = None) -> str:
    """Journal text for the whole sweep"""
    on_demand = _scheme_string(f"{plan.on_demand}::{plan.udf_library}")

    lines: List[str] = [
        "; AoA sweep journal",
        f"; {len(plan)} points, {plan.iterations} iterations per point",
        f"; U = {config.freestream_speed:g} m/s, rho = {config.density:g} kg/m3, "
        f"Aref = {config.reference_area:g} m2, Lref = {config.reference_length:g} m",
        f"; results -> {config.results_file}",
    ]

    if case_file:
        lines.append(f"/file/read-case-data {_scheme_string(case_file)}")

    for i, aoa in enumerate(plan.aoa_values):
        lines.append("")
        lines.append(f"; --- AoA = {aoa:g} deg ---")
        lines.append(write_aoa_command(aoa, config.aoa_file))
        if initialize and i == 0:
            lines.append("/solve/initialize/initialize-flow")
        lines.append(f"/solve/iterate {plan.iterations}")
        lines.append(f"/define/user-defined/execute-on-demand {on_demand}")

    lines.append("")
    return "\n".join(lines)


def write_journal(plan: SweepPlan,
                  config: AeroConfig,
                  output_file: Union[str, Path],
                  **kwargs) -> Path:
    """Write the sweep journal to disk"""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        f.write(render_journal(plan, config, **kwargs))

    return output_path

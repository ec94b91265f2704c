"""
Aerodynamic Configuration

공력 계수 계산 설정 (freestream, reference values, file locations)

Usage:
    from aerosweep.config import AeroConfig

    config = AeroConfig.from_yaml("configs/wing.yaml")
    print(config.dynamic_pressure, config.reference_point)
"""

import logging
import math
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

SurfaceId = Union[int, str]


@dataclass(frozen=True)
class AeroConfig:
    """Freestream, reference quantities and exchange file locations"""
    # Freestream
    freestream_speed: float = 16.0     # m/s
    density: float = 1.225             # kg/m^3

    # Reference values
    reference_area: float = 0.4        # m^2
    reference_length: float = 0.435    # m

    # Target surface (face-zone id or zone name)
    surface: SurfaceId = 5

    # Exchange files (relative to the solver working directory)
    aoa_file: str = "aoa.txt"
    results_file: str = "aoa_results.txt"

    # Raise instead of falling back when the AoA file is missing/malformed
    strict_aoa: bool = False

    # Nested YAML sections -> field names
    SECTIONS = {
        'freestream': {'speed': 'freestream_speed', 'density': 'density'},
        'reference': {'area': 'reference_area', 'length': 'reference_length',
                      'surface': 'surface'},
        'files': {'aoa': 'aoa_file', 'results': 'results_file'},
    }

    @property
    def dynamic_pressure(self) -> float:
        """q = 0.5 * rho * U^2"""
        return 0.5 * self.density * self.freestream_speed ** 2

    @property
    def reference_point(self) -> Tuple[float, float, float]:
        """Moment reference point: quarter chord on the centerline plane"""
        return (0.25 * self.reference_length, 0.0, 0.0)

    def validate(self) -> Tuple[List[str], List[str]]:
        """
        Check configuration values

        Returns:
        --------
        Tuple[List[str], List[str]]: (errors, warnings)
        """
        errors = []
        warnings = []

        positive = {
            'freestream_speed': self.freestream_speed,
            'density': self.density,
            'reference_area': self.reference_area,
            'reference_length': self.reference_length,
        }
        for name, value in positive.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{name} must be a number, got {value!r}")
            elif not math.isfinite(value):
                errors.append(f"{name} must be finite, got {value}")
            elif value < 0:
                errors.append(f"{name} must be non-negative, got {value}")
            elif value == 0:
                warnings.append(f"{name} is zero: coefficients will be clamped to 0")

        if isinstance(self.surface, bool) or not isinstance(self.surface, (int, str)):
            errors.append(f"surface must be a zone id or name, got {self.surface!r}")
        elif isinstance(self.surface, str) and not self.surface.strip():
            errors.append("surface name is empty")

        for name in ('aoa_file', 'results_file'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                errors.append(f"{name} must be a non-empty path")

        if errors == [] and self.aoa_file == self.results_file:
            errors.append("aoa_file and results_file must differ")

        return errors, warnings

    def checked(self, source: str = None) -> 'AeroConfig':
        """Validate once; raise ConfigError on errors, log warnings"""
        errors, warnings = self.validate()
        if errors:
            raise ConfigError(errors, source)
        for w in warnings:
            logger.warning(f"Config warning: {w}")
        return self

    @classmethod
    def from_dict(cls, data: Dict, source: str = None) -> 'AeroConfig':
        """Build from flat keys and/or nested freestream/reference/files sections"""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError([f"configuration must be a mapping, got {type(data).__name__}"],
                              source)

        known = set(cls.__dataclass_fields__)
        values = {}
        unknown = []

        for key, value in data.items():
            if key in cls.SECTIONS:
                if not isinstance(value, dict):
                    raise ConfigError([f"section '{key}' must be a mapping"], source)
                mapping = cls.SECTIONS[key]
                for sub_key, sub_value in value.items():
                    if sub_key in mapping:
                        values[mapping[sub_key]] = sub_value
                    else:
                        unknown.append(f"{key}.{sub_key}")
            elif key in known:
                values[key] = value
            elif key == 'sweep':
                # Consumed by SweepPlan.from_yaml
                continue
            else:
                unknown.append(key)

        for key in unknown:
            logger.warning(f"Ignoring unknown configuration key: {key}")

        for name in ('freestream_speed', 'density', 'reference_area', 'reference_length'):
            if name in values and isinstance(values[name], str):
                try:
                    values[name] = float(values[name])
                except ValueError:
                    pass  # reported by validate()

        return cls(**values).checked(source)

    @classmethod
    def from_yaml(cls, filepath: Union[str, Path]) -> 'AeroConfig':
        """YAML 파일에서 설정 로드"""
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError([f"Failed to parse YAML: {e}"], str(path)) from e

        return cls.from_dict(data, source=str(path))

    def to_dict(self) -> Dict:
        return asdict(self)

    def to_yaml(self, filepath: Union[str, Path]) -> Path:
        """Write configuration in the nested section layout"""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        flat = self.to_dict()
        data = {}
        for section, mapping in self.SECTIONS.items():
            data[section] = {key: flat.pop(field) for key, field in mapping.items()}
        data.update(flat)

        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, sort_keys=False)
        return path

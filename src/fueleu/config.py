"""Regulatory configuration for compliance balance computation."""

import os
from dataclasses import dataclass
from typing import Optional

# FuelEU Maritime (EU) 2023/1805, 2025-2029 limit: 2% below 91.16 gCO2e/MJ
DEFAULT_TARGET_INTENSITY = 89.3368  # gCO2e/MJ
DEFAULT_ENERGY_FACTOR = 41000.0  # MJ/t

TARGET_INTENSITY_ENV = "FUELEU_TARGET_INTENSITY"
ENERGY_FACTOR_ENV = "FUELEU_ENERGY_FACTOR"


@dataclass(frozen=True)
class ComplianceConfig:
    """Constants used when computing compliance balances."""

    target_intensity: float = DEFAULT_TARGET_INTENSITY
    energy_factor: float = DEFAULT_ENERGY_FACTOR


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number, got '{value}'")


def load_config(
    target_intensity: Optional[float] = None, energy_factor: Optional[float] = None
) -> ComplianceConfig:
    """Build configuration from explicit values or the environment.

    Args:
        target_intensity: Overrides FUELEU_TARGET_INTENSITY if given
        energy_factor: Overrides FUELEU_ENERGY_FACTOR if given

    Returns:
        ComplianceConfig instance
    """
    if target_intensity is None:
        target_intensity = _env_float(TARGET_INTENSITY_ENV, DEFAULT_TARGET_INTENSITY)
    if energy_factor is None:
        energy_factor = _env_float(ENERGY_FACTOR_ENV, DEFAULT_ENERGY_FACTOR)
    return ComplianceConfig(target_intensity=target_intensity, energy_factor=energy_factor)

"""Properties of air at a given temperature and static pressure."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import pi, sqrt

from .ranges import ConfigError, NamedRange

# Physical constants
GAS_CONSTANT = 287.05  # J/(kg·K)
GAMMA = 1.402  # Ratio of specific heats
AIR_DENSITY_0 = 1.293  # kg/m³ at 0°C
ONE_ATM = 101325.0  # Pa
KELVIN_OFFSET = 273.15
AIR_VISCOSITY = 0.0000185  # Viscosity of air used by the panel models

TEMPERATURE_RANGE = NamedRange("Air Temperature", "°C", -20, 20, 100)
PRESSURE_RANGE = NamedRange("Air Pressure", "bar", 0.8, 1.0, 1.1)


def air_density(pressure: float, temperature: float) -> float:
    """Density of air in kg/m³ (pressure in bar, temperature in °C)."""
    return (pressure * ONE_ATM) / (GAS_CONSTANT * (temperature + KELVIN_OFFSET))


def sound_velocity(temperature: float) -> float:
    """Speed of sound in air in m/s (temperature in °C)."""
    return sqrt((GAMMA * ONE_ATM) / AIR_DENSITY_0) * sqrt(1.0 + temperature / KELVIN_OFFSET)


@dataclass(frozen=True)
class AirProperties:
    """Air at a given temperature and pressure.

    All derived fields are computed once from temperature and pressure.

    Args:
        temperature: Air temperature in °C (-20 to 100)
        pressure: Static pressure in bar (0.8 to 1.1)

    Attributes:
        density: kg/m³
        velocity: Speed of sound in m/s
        impedance: Characteristic impedance ρc in rayls
        two_pi_over_c: 2π/c, multiply by frequency to get the wave number
        c_over_two_pi: c/2π
        density_over_viscosity: ρ/η, used by the microperforated model

    Example:
        >>> air = AirProperties(temperature=20, pressure=1.0)
        >>> round(air.impedance, 1)
        413.5
    """

    temperature: int = TEMPERATURE_RANGE.default
    pressure: float = PRESSURE_RANGE.default

    density: float = field(init=False)
    velocity: float = field(init=False)
    impedance: float = field(init=False)
    two_pi_over_c: float = field(init=False)
    c_over_two_pi: float = field(init=False)
    density_over_viscosity: float = field(init=False)

    def __post_init__(self):
        """Validate inputs and derive air properties."""
        TEMPERATURE_RANGE.check(self.temperature)
        if self.temperature != int(self.temperature):
            raise ConfigError(
                f"Air Temperature must be a whole number of °C, not '{self.temperature}'"
            )
        PRESSURE_RANGE.check(self.pressure)

        density = air_density(self.pressure, self.temperature)
        velocity = sound_velocity(self.temperature)

        object.__setattr__(self, "density", density)
        object.__setattr__(self, "velocity", velocity)
        object.__setattr__(self, "impedance", velocity * density)
        object.__setattr__(self, "two_pi_over_c", (2.0 * pi) / velocity)
        object.__setattr__(self, "c_over_two_pi", velocity / (2.0 * pi))
        object.__setattr__(self, "density_over_viscosity", density / AIR_VISCOSITY)

    @classmethod
    def default(cls) -> AirProperties:
        return cls()

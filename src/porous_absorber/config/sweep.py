"""Logarithmic frequency sweep over a fixed number of octaves."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import log2

from .ranges import ConfigError, NamedRange

START_FREQUENCY_RANGE = NamedRange("Graph Start Frequency", "Hz", 20.0, 62.5, 100.0)

SUBDIVISIONS = (1, 2, 3, 6)
DEFAULT_SUBDIVISIONS = 3

DISPLAY_OCTAVES = 8


def generate_frequencies(
    start_frequency: float,
    subdivisions: int,
    octaves: int = DISPLAY_OCTAVES,
) -> list[float]:
    """Generate octave-subdivided frequencies starting at start_frequency.

    The upper bound is included, so a 62.5 Hz start over 8 octaves ends
    at 16 kHz.

    Args:
        start_frequency: First frequency in Hz
        subdivisions: Number of intervals per octave
        octaves: Number of octaves to span

    Returns:
        List of octaves * subdivisions + 1 frequencies in Hz
    """
    log_start = log2(start_frequency)

    return [start_frequency] + [
        2.0 ** (log_start + interval / subdivisions)
        for interval in range(1, octaves * subdivisions + 1)
    ]


@dataclass(frozen=True)
class SweepConfig:
    """Frequencies at which absorption is calculated.

    Args:
        start_frequency: First frequency in Hz (20 to 100)
        subdivisions: Octave subdivisions, one of 1, 2, 3 or 6

    Attributes:
        frequencies: Ascending tuple of frequencies in Hz

    Example:
        >>> sweep = SweepConfig(start_frequency=62.5, subdivisions=1)
        >>> [round(f, 1) for f in sweep.frequencies]
        [62.5, 125.0, 250.0, 500.0, 1000.0, 2000.0, 4000.0, 8000.0, 16000.0]
    """

    start_frequency: float = START_FREQUENCY_RANGE.default
    subdivisions: int = DEFAULT_SUBDIVISIONS
    frequencies: tuple[float, ...] = field(init=False)

    def __post_init__(self):
        START_FREQUENCY_RANGE.check(self.start_frequency)

        if self.subdivisions not in SUBDIVISIONS:
            raise ConfigError(
                "Octave subdivisions argument must be either 1, 2, 3 or 6, "
                f"not '{self.subdivisions}'"
            )

        object.__setattr__(
            self,
            "frequencies",
            tuple(generate_frequencies(self.start_frequency, self.subdivisions)),
        )

    @classmethod
    def default(cls) -> SweepConfig:
        return cls()

"""Shared fixtures for the porous-absorber test suite."""

import pytest

from porous_absorber.config import (
    AirProperties,
    CavityProperties,
    IncidenceAngle,
    MicroperforatedPanel,
    PerforatedPanel,
    PorousLayerProperties,
    SlottedPanel,
    SweepConfig,
)


@pytest.fixture
def air():
    """Air at 20°C and 1 bar."""
    return AirProperties(temperature=20, pressure=1.0)


@pytest.fixture
def cavity():
    """100 mm air gap."""
    return CavityProperties(air_gap_mm=100)


@pytest.fixture
def porous_layer():
    """30 mm porous layer with σ = 16500 rayls/m."""
    return PorousLayerProperties(thickness_mm=30, sigma=16500)


@pytest.fixture
def normal_incidence():
    return IncidenceAngle(angle=0)


@pytest.fixture
def perforated():
    """10 mm panel with 12.7 mm radius holes on 25.4 mm centres."""
    return PerforatedPanel(thickness_mm=10, hole_centres_mm=25.4, hole_radius_mm=12.7)


@pytest.fixture
def slotted():
    return SlottedPanel(thickness_mm=10, slot_distance_mm=25.4, slot_width_mm=5)


@pytest.fixture
def microperforated():
    return MicroperforatedPanel(thickness_mm=1, hole_centres_mm=5, hole_radius_mm=0.25)


@pytest.fixture
def frequencies():
    """Default sweep: 62.5 Hz to 16 kHz in third octaves."""
    return SweepConfig().frequencies

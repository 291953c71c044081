"""Tests for the rigid backed porous absorber calculator."""

import numpy as np
import pytest

from porous_absorber.config import CavityProperties, IncidenceAngle, PorousLayerProperties
from porous_absorber.devices import DeviceType, porous_absorber


def assert_valid_absorption(value):
    assert 0.0 <= value <= 1.0
    assert round(value, 2) == value


class TestCalculatePlotPoint:
    """Tests for absorption at a single frequency."""

    def test_reference_scenario(self, air, cavity, porous_layer, normal_incidence):
        """30 mm layer, σ = 16500, 100 mm air gap, normal incidence, 500 Hz."""
        no_gap, gap = porous_absorber.calculate_plot_point(
            500.0, air, cavity, porous_layer, normal_incidence
        )
        assert_valid_absorption(no_gap)
        assert_valid_absorption(gap)

    def test_deterministic(self, air, cavity, porous_layer, normal_incidence):
        first = porous_absorber.calculate_plot_point(
            500.0, air, cavity, porous_layer, normal_incidence
        )
        second = porous_absorber.calculate_plot_point(
            500.0, air, cavity, porous_layer, normal_incidence
        )
        assert first == second

    def test_air_gap_improves_low_frequency(self, air, cavity, porous_layer, normal_incidence):
        """A 100 mm gap behind a 30 mm layer absorbs more at 250 Hz."""
        no_gap, gap = porous_absorber.calculate_plot_point(
            250.0, air, cavity, porous_layer, normal_incidence
        )
        assert gap > no_gap

    def test_no_gap_ignores_cavity(self, air, porous_layer, normal_incidence):
        shallow = CavityProperties(air_gap_mm=50)
        deep = CavityProperties(air_gap_mm=300)

        no_gap_shallow, _ = porous_absorber.calculate_plot_point(
            800.0, air, shallow, porous_layer, normal_incidence
        )
        no_gap_deep, _ = porous_absorber.calculate_plot_point(
            800.0, air, deep, porous_layer, normal_incidence
        )
        assert no_gap_shallow == no_gap_deep

    def test_absorption_rises_with_frequency(self, air, cavity, porous_layer, normal_incidence):
        low, _ = porous_absorber.calculate_plot_point(
            62.5, air, cavity, porous_layer, normal_incidence
        )
        high, _ = porous_absorber.calculate_plot_point(
            8000.0, air, cavity, porous_layer, normal_incidence
        )
        assert high > low

    @pytest.mark.parametrize("angle", [0, 30, 60, 89])
    def test_oblique_incidence(self, air, cavity, porous_layer, frequencies, angle):
        incidence = IncidenceAngle(angle=angle)
        for frequency in frequencies:
            for value in porous_absorber.calculate_plot_point(
                frequency, air, cavity, porous_layer, incidence
            ):
                assert_valid_absorption(value)

    def test_zero_frequency_propagates_nan(self, air, cavity, porous_layer, normal_incidence):
        no_gap, gap = porous_absorber.calculate_plot_point(
            0.0, air, cavity, porous_layer, normal_incidence
        )
        assert np.isnan(no_gap)
        assert np.isnan(gap)


class TestCalculatePlotPoints:
    """Tests for the full sweep."""

    def test_series_order(self, air, cavity, porous_layer, normal_incidence, frequencies):
        info = porous_absorber.calculate_plot_points(
            frequencies, air, cavity, porous_layer, normal_incidence
        )
        assert info.device_type is DeviceType.RIGID_BACKED_POROUS_ABSORBER
        assert [series.name for series in info.series] == ["Air Gap", "No Air Gap"]

    def test_series_match_single_points(
        self, air, cavity, porous_layer, normal_incidence, frequencies
    ):
        info = porous_absorber.calculate_plot_points(
            frequencies, air, cavity, porous_layer, normal_incidence
        )
        air_gap = info.series_by_name("Air Gap")
        no_air_gap = info.series_by_name("No Air Gap")

        for index, frequency in enumerate(frequencies):
            no_gap, gap = porous_absorber.calculate_plot_point(
                frequency, air, cavity, porous_layer, normal_incidence
            )
            assert air_gap.points[index].absorption == gap
            assert no_air_gap.points[index].absorption == no_gap

    def test_frequencies_preserved(
        self, air, cavity, porous_layer, normal_incidence, frequencies
    ):
        info = porous_absorber.calculate_plot_points(
            frequencies, air, cavity, porous_layer, normal_incidence
        )
        for series in info.series:
            assert len(series) == len(frequencies)
            assert series.frequencies == list(frequencies)

    def test_records_configuration(
        self, air, cavity, porous_layer, normal_incidence, frequencies
    ):
        info = porous_absorber.calculate_plot_points(
            frequencies, air, cavity, porous_layer, normal_incidence
        )
        assert info.cavity is cavity
        assert info.porous_layer is porous_layer
        assert info.panel is None

    def test_thick_absorber(self, air, cavity, normal_incidence, frequencies):
        layer = PorousLayerProperties(thickness_mm=500, sigma=100000)
        info = porous_absorber.calculate_plot_points(
            frequencies, air, cavity, layer, normal_incidence
        )
        for series in info.series:
            for value in series.absorptions:
                assert_valid_absorption(value)

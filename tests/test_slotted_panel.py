"""Tests for the slotted panel absorber calculator."""

import math

import numpy as np

from porous_absorber.config import PorousLayerProperties, SlottedPanel
from porous_absorber.devices import DeviceType, slotted_panel

SERIES = ["No Air Gap", "Absorber Against Panel", "Absorber Against Backing"]


def assert_valid_absorption(value):
    assert 0.0 <= value <= 1.0
    assert round(value, 2) == value


class TestSlotGeometry:
    """Tests for the slot end correction and flow resistance."""

    def test_delta(self):
        porosity = 0.25
        expected = -math.log(math.sin(math.pi * porosity / 2)) / math.pi
        assert np.isclose(slotted_panel.end_correction_delta(porosity), expected)

    def test_no_end_correction_when_fully_open(self):
        assert slotted_panel.end_correction_delta(1.0) == 0.0

    def test_end_corrected_thickness(self, slotted):
        delta = slotted_panel.end_correction_delta(slotted.porosity)
        assert delta > 0
        assert np.isclose(
            slotted_panel.end_corrected_thickness(slotted), 0.01 + 2 * 0.005 * delta
        )

    def test_flow_resistance(self, porous_layer):
        assert np.isclose(slotted_panel.flow_resistance(porous_layer), 16500 * 0.03)


class TestCalculatePlotPoint:
    """Tests for absorption at a single frequency."""

    def test_values_valid(self, air, cavity, slotted, porous_layer, frequencies):
        ec_thickness = slotted_panel.end_corrected_thickness(slotted)
        for frequency in frequencies:
            values = slotted_panel.calculate_plot_point(
                frequency, air, cavity, slotted, porous_layer, ec_thickness
            )
            assert len(values) == 3
            for value in values:
                assert_valid_absorption(value)

    def test_deterministic(self, air, cavity, slotted, porous_layer):
        ec_thickness = slotted_panel.end_corrected_thickness(slotted)
        first = slotted_panel.calculate_plot_point(
            1000.0, air, cavity, slotted, porous_layer, ec_thickness
        )
        second = slotted_panel.calculate_plot_point(
            1000.0, air, cavity, slotted, porous_layer, ec_thickness
        )
        assert first == second

    def test_zero_frequency_propagates_nan(self, air, cavity, slotted, porous_layer):
        ec_thickness = slotted_panel.end_corrected_thickness(slotted)
        values = slotted_panel.calculate_plot_point(
            0.0, air, cavity, slotted, porous_layer, ec_thickness
        )
        assert all(np.isnan(value) for value in values)


class TestCalculatePlotPoints:
    """Tests for the full sweep."""

    def test_series_order(self, air, cavity, slotted, porous_layer, frequencies):
        info = slotted_panel.calculate_plot_points(
            frequencies, air, cavity, slotted, porous_layer
        )
        assert info.device_type is DeviceType.SLOTTED_PANEL_ABSORBER
        assert [series.name for series in info.series] == SERIES
        assert info.panel is slotted

    def test_series_length(self, air, cavity, slotted, porous_layer, frequencies):
        info = slotted_panel.calculate_plot_points(
            frequencies, air, cavity, slotted, porous_layer
        )
        for series in info.series:
            assert series.frequencies == list(frequencies)

    def test_wide_slots_and_dense_absorber(self, air, cavity, frequencies):
        panel = SlottedPanel(thickness_mm=3, slot_distance_mm=10, slot_width_mm=40)
        layer = PorousLayerProperties(thickness_mm=100, sigma=50000)
        info = slotted_panel.calculate_plot_points(frequencies, air, cavity, panel, layer)
        for series in info.series:
            for value in series.absorptions:
                assert_valid_absorption(value)

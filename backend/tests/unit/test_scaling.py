"""
Unit tests for scaling helpers — proportional height, LED length and power.
Version: 1.0.0
"""
import pytest

from app.utils.scaling import (
    calculate_area_m2,
    power_from_led_length,
    proportional_height,
    proportional_led_length,
    round_half_up,
)


pytestmark = pytest.mark.unit


class TestRoundHalfUp:

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_below_half_rounds_down(self):
        assert round_half_up(2.49) == 2

    def test_integer_unchanged(self):
        assert round_half_up(7.0) == 7


class TestProportionalHeight:

    def test_half_scale(self):
        assert proportional_height(400, 200, 200) == 100

    def test_rounds_to_nearest_cm(self):
        # 333 * 100 / 300 = 111
        assert proportional_height(300, 100, 333) == 111
        # 250 * 150 / 500 = 75
        assert proportional_height(500, 150, 250) == 75

    @pytest.mark.parametrize("width", [1, 37, 120, 999])
    def test_matches_ratio_formula(self, width):
        assert proportional_height(400, 200, width) == round_half_up(width * 200 / 400)

    def test_zero_reference_width_raises(self):
        with pytest.raises(ValueError):
            proportional_height(0, 100, 50)

    def test_never_negative(self):
        assert proportional_height(400, 200, 0) == 0


class TestProportionalLedLength:

    def test_perimeter_ratio_half(self):
        assert proportional_led_length(400, 200, 12, 200, 100) == pytest.approx(6.0)

    def test_scales_linearly(self):
        base = proportional_led_length(300, 100, 18, 300, 100)
        doubled = proportional_led_length(300, 100, 18, 600, 200)
        assert base == pytest.approx(18.0)
        assert doubled == pytest.approx(36.0)

    def test_floors_to_one_decimal(self):
        # 12 * (2 * (130 + 65)) / 1200 = 3.9
        assert proportional_led_length(400, 200, 12, 130, 65) == pytest.approx(3.9)
        # 12 * (2 * (133 + 67)) / 1200 = 4.0
        assert proportional_led_length(400, 200, 12, 133, 67) == pytest.approx(4.0)
        # 12 * (2 * (131 + 66)) / 1200 = 3.94 -> 3.9
        assert proportional_led_length(400, 200, 12, 131, 66) == pytest.approx(3.9)

    def test_minimum_one_meter(self):
        assert proportional_led_length(400, 200, 12, 20, 10) == 1.0

    def test_zero_reference_raises(self):
        with pytest.raises(ValueError):
            proportional_led_length(0, 0, 12, 100, 50)


class TestPowerAndArea:

    def test_power_from_led_length(self):
        # 6 m * 8 W/m * 1.25 = 60 W
        assert power_from_led_length(6.0) == 60

    def test_power_rounds_half_up(self):
        # 1.05 * 10 = 10.5 -> 11
        assert power_from_led_length(1.05) == 11

    def test_area(self):
        assert calculate_area_m2(200, 100) == pytest.approx(2.0)
        assert calculate_area_m2(50, 50) == pytest.approx(0.25)

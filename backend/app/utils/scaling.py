"""
Scaling helpers — proportional dimensions, LED length and power draw.

Pure functions; safe to call on every width change.
Version: 1.0.0
"""
import math

from app.core.constants.pricing import (
    LED_WATT_PER_METER,
    MIN_LED_LENGTH_M,
    POWER_SAFETY_FACTOR,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def calculate_area_m2(width_cm: float, height_cm: float) -> float:
    """Sign area in m² from centimeter dimensions."""
    return (width_cm * height_cm) / 10000


def proportional_height(original_width: float, original_height: float, new_width: float) -> int:
    """Height that keeps the design's reference aspect ratio."""
    if original_width <= 0:
        raise ValueError("original_width must be positive")
    return max(0, round_half_up(new_width * original_height / original_width))


def proportional_led_length(
    original_width: float,
    original_height: float,
    original_led_length: float,
    new_width: float,
    new_height: float,
) -> float:
    """
    LED length scaled by the perimeter ratio.

    The strip follows the outline, so it grows with the perimeter rather
    than with area. Floored to 0.1 m, never below 1 m.
    """
    original_perimeter = 2 * (original_width + original_height)
    if original_perimeter <= 0:
        raise ValueError("reference dimensions must be positive")
    new_perimeter = 2 * (new_width + new_height)
    scaled = original_led_length * (new_perimeter / original_perimeter)
    # round() guards against 5.9999999 style float noise before flooring
    floored = math.floor(round(scaled * 10, 6)) / 10
    return max(MIN_LED_LENGTH_M, floored)


def power_from_led_length(led_length_m: float) -> int:
    """Power draw in watts: 8 W/m plus a 25 % safety margin."""
    return round_half_up(led_length_m * LED_WATT_PER_METER * POWER_SAFETY_FACTOR)

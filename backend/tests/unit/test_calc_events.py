"""
Unit tests for the calculation event log hook.
Version: 1.0.0
"""
import logging

import pytest

from app.schemas.shipping import ShippingSelection
from app.utils.calc_events import log_calculation


@pytest.mark.unit
class TestLogCalculation:

    def test_single_record_with_json_payload(self, caplog):
        with caplog.at_level(logging.INFO, logger="calculations"):
            log_calculation("shipping_info", {"distance_km": 12}, {"cost": 36.0})

        records = [r for r in caplog.records if r.name == "calculations"]
        assert len(records) == 1
        message = records[0].getMessage()
        assert "event=shipping_info" in message
        assert '{"distance_km": 12}' in message
        assert '{"cost": 36.0}' in message

    def test_non_json_values_are_stringified(self, caplog):
        with caplog.at_level(logging.INFO, logger="calculations"):
            log_calculation("order_totals", {"shipping_selection": ShippingSelection.PICKUP}, {})
        assert "pickup" in caplog.text

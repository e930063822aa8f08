"""
Calculation events — one structured log record per pricing calculation.

Calculators take an ``on_event`` callable with the signature of
``log_calculation`` so tests (or a metrics exporter) can capture events.
Version: 1.0.0
"""
import json
import logging
from typing import Any, Callable, Dict

logger = logging.getLogger("calculations")

CalculationHook = Callable[[str, Dict[str, Any], Dict[str, Any]], None]


def log_calculation(event: str, inputs: Dict[str, Any], outputs: Dict[str, Any]) -> None:
    """Emit a single INFO record with JSON-encoded inputs and outputs."""
    logger.info(
        "calculation event=%s inputs=%s outputs=%s",
        event,
        json.dumps(inputs, ensure_ascii=True, default=str, sort_keys=True),
        json.dumps(outputs, ensure_ascii=True, default=str, sort_keys=True),
    )

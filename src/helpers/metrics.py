"""Formatting helpers for training metrics returned by the backend."""

from __future__ import annotations

import json
import math
from typing import Any, List, Mapping, Optional, Tuple


def is_numeric_scalar(value: Any) -> bool:
    """True for finite ints/floats; bools, NaN, infinities and containers are not."""
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def numeric_scalar_metrics(metrics: Optional[Mapping[str, Any]]) -> List[Tuple[str, float]]:
    """Keep only the entries whose value is a finite number, in response order."""
    if not metrics:
        return []
    return [(k, v) for k, v in metrics.items() if is_numeric_scalar(v)]


def format_metric_value(value: float, digits: int = 4) -> str:
    return f"{value:.{digits}f}"


def metrics_to_json(metrics: Optional[Mapping[str, Any]]) -> str:
    """Pretty-print a metrics mapping of any shape."""
    return json.dumps(metrics if metrics is not None else {}, indent=2, ensure_ascii=False, default=str)

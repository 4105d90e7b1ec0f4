from __future__ import annotations

from typing import Any, Literal, cast

from trajclass.core.constants import METRIC_CODES, SUPPORTED_METRICS
from trajclass.core.errors import UnknownMetricError

MetricName = Literal["length", "speed"]


def parse_metric(raw: Any) -> MetricName:
    """Normalize a metric name or menu code to a supported metric.

    Accepts ``"length"``/``"speed"`` in any case, and the menu codes
    ``1``/``2`` either as ints or as digit strings.
    """
    if isinstance(raw, bool):
        raise UnknownMetricError(f"Unsupported metric: {raw!r}", details={"metric": raw})
    if isinstance(raw, int):
        name = METRIC_CODES.get(raw)
        if name is None:
            raise UnknownMetricError(f"Unsupported metric code: {raw}", details={"metric": raw})
        return cast(MetricName, name)
    if not isinstance(raw, str):
        raise UnknownMetricError(f"Unsupported metric: {raw!r}", details={"metric": raw})

    token = raw.strip().lower()
    if token.isascii() and token.isdecimal():
        return parse_metric(int(token))
    if token not in SUPPORTED_METRICS:
        supported = "|".join(SUPPORTED_METRICS)
        raise UnknownMetricError(
            f"Unsupported metric '{raw}'. Expected one of {supported}.",
            details={"metric": raw},
        )
    return cast(MetricName, token)


__all__ = ["MetricName", "parse_metric"]

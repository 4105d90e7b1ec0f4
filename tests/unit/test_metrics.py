from __future__ import annotations

import pytest

from trajclass.core.engine import load
from trajclass.core.errors import UnknownMetricError
from trajclass.core.metrics import parse_metric
from trajclass.core.models import Sample, Trajectory


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("length", "length"),
        ("Speed", "speed"),
        (" LENGTH ", "length"),
        (1, "length"),
        (2, "speed"),
        ("1", "length"),
        ("2", "speed"),
    ],
)
def test_parse_metric_accepts_names_and_menu_codes(raw: object, expected: str) -> None:
    assert parse_metric(raw) == expected


@pytest.mark.parametrize("raw", ["area", "", 0, 3, "3", None, True, 1.0, "\u00b2", "\u0661", "-1"])
def test_parse_metric_rejects_unsupported_values(raw: object) -> None:
    with pytest.raises(UnknownMetricError):
        parse_metric(raw)


def test_query_with_superscript_digit_metric_raises_unknown_metric() -> None:
    state = load([Trajectory(id=0, samples=(Sample(0, 0, 0),)), Trajectory(id=1, samples=(Sample(1, 0, 1),))])

    with pytest.raises(UnknownMetricError):
        state.query(0, "²")

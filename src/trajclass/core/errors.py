from __future__ import annotations

from typing import Any

from trajclass.core.constants import (
    ERROR_CODE_INVALID_INPUT,
    ERROR_CODE_OUT_OF_RANGE,
    ERROR_CODE_UNKNOWN_METRIC,
)


class TrajclassError(Exception):
    """Base class for errors reported by the classification core."""

    code: str = "TRAJCLASS_ERROR"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidInputError(TrajclassError, ValueError):
    code = ERROR_CODE_INVALID_INPUT


class OutOfRangeError(TrajclassError, IndexError):
    code = ERROR_CODE_OUT_OF_RANGE


class UnknownMetricError(TrajclassError, ValueError):
    code = ERROR_CODE_UNKNOWN_METRIC


VALID_ERROR_CODES = {
    ERROR_CODE_INVALID_INPUT,
    ERROR_CODE_OUT_OF_RANGE,
    ERROR_CODE_UNKNOWN_METRIC,
}


__all__ = [
    "VALID_ERROR_CODES",
    "InvalidInputError",
    "OutOfRangeError",
    "TrajclassError",
    "UnknownMetricError",
]

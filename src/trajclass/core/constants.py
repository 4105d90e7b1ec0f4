from __future__ import annotations

# Retention capacity per (trajectory, metric). Fixed at build time.
NEIGHBOR_CAPACITY = 3

# Score carried by empty retention slots. Lower than any legal diff.
SENTINEL_SCORE = -1.0

METRIC_LENGTH = "length"
METRIC_SPEED = "speed"
SUPPORTED_METRICS = (METRIC_LENGTH, METRIC_SPEED)

# Numeric menu codes accepted by the interactive prompt.
METRIC_CODES = {
    1: METRIC_LENGTH,
    2: METRIC_SPEED,
}

ERROR_CODE_INVALID_INPUT = "INVALID_INPUT"
ERROR_CODE_OUT_OF_RANGE = "OUT_OF_RANGE"
ERROR_CODE_UNKNOWN_METRIC = "UNKNOWN_METRIC"

EXIT_SUCCESS = 0
EXIT_QUERY_ERROR = 1
EXIT_INTERNAL_ERROR = 2

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from trajclass.core.constants import SUPPORTED_METRICS
from trajclass.core.metrics import MetricName, parse_metric
from trajclass.core.retention import NeighborSlot, RetentionArray


@dataclass(slots=True, frozen=True)
class Sample:
    x: int
    y: int
    t: int

    def distance_to(self, other: Sample) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "t": self.t}


@dataclass(slots=True)
class Trajectory:
    """One timestamp-ordered sample sequence plus its retention arrays.

    Samples are expected sorted ascending by ``t``; use :meth:`from_samples`
    to build one from unsorted readings. The trajectory owns one
    :class:`RetentionArray` per metric; slots refer to peers by id only.
    """

    id: int
    samples: tuple[Sample, ...]
    _length: float | None = field(default=None, init=False, repr=False, compare=False)
    _retention: dict[str, RetentionArray] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.samples = tuple(self.samples)
        self._retention = {metric: RetentionArray() for metric in SUPPORTED_METRICS}

    @classmethod
    def from_samples(cls, trajectory_id: int, samples: Iterable[Sample]) -> Trajectory:
        # sorted() is stable, so equal timestamps keep their input order.
        return cls(id=trajectory_id, samples=tuple(sorted(samples, key=lambda sample: sample.t)))

    def is_time_ordered(self) -> bool:
        return all(prev.t <= curr.t for prev, curr in zip(self.samples, self.samples[1:]))

    def length(self) -> float:
        if self._length is None:
            self._length = sum(
                (prev.distance_to(curr) for prev, curr in zip(self.samples, self.samples[1:])),
                0.0,
            )
        return self._length

    def duration(self) -> float:
        if len(self.samples) < 2:
            return 0.0
        return float(self.samples[-1].t - self.samples[0].t)

    def speed(self) -> float:
        # Stationary and zero-elapsed-time trajectories both report 0.
        length = self.length()
        duration = self.duration()
        if length == 0.0 or duration == 0.0:
            return 0.0
        return length / duration

    def retention(self, metric: Any) -> RetentionArray:
        return self._retention[parse_metric(metric)]

    def submit_neighbor_candidate(self, metric: MetricName, score: float, neighbor_id: int) -> bool:
        return self.retention(metric).submit(score, neighbor_id)

    def neighbors(self, metric: Any) -> list[NeighborSlot]:
        return self.retention(metric).slots

    def has_candidates(self) -> bool:
        return any(array.submitted for array in self._retention.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "sample_count": len(self.samples),
            "length": self.length(),
            "duration": self.duration(),
            "speed": self.speed(),
            "neighbors": {metric: array.to_dict() for metric, array in self._retention.items()},
        }


__all__ = ["Sample", "Trajectory"]

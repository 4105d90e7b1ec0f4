from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from trajclass.core.constants import METRIC_LENGTH, METRIC_SPEED, NEIGHBOR_CAPACITY
from trajclass.core.errors import InvalidInputError, OutOfRangeError
from trajclass.core.metrics import parse_metric
from trajclass.core.models import Trajectory

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EngineState:
    """Classified trajectory set, read-only once :func:`load` returns."""

    trajectories: list[Trajectory]
    pair_count: int = 0
    _index_by_id: dict[int, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._index_by_id = {trajectory.id: index for index, trajectory in enumerate(self.trajectories)}

    def __len__(self) -> int:
        return len(self.trajectories)

    def trajectory_at(self, trajectory_index: Any) -> Trajectory:
        if isinstance(trajectory_index, bool) or not isinstance(trajectory_index, int):
            raise OutOfRangeError(
                f"Trajectory index must be an integer, got: {trajectory_index!r}",
                details={"index": trajectory_index, "count": len(self.trajectories)},
            )
        if trajectory_index < 0 or trajectory_index >= len(self.trajectories):
            raise OutOfRangeError(
                f"Trajectory index {trajectory_index} outside [0, {len(self.trajectories)})",
                details={"index": trajectory_index, "count": len(self.trajectories)},
            )
        return self.trajectories[trajectory_index]

    def trajectory_by_id(self, trajectory_id: int) -> Trajectory:
        index = self._index_by_id.get(trajectory_id)
        if index is None:
            raise OutOfRangeError(f"Unknown trajectory id: {trajectory_id}", details={"id": trajectory_id})
        return self.trajectories[index]

    def query(self, trajectory_index: Any, metric: Any) -> list[int]:
        """Return retained neighbor ids in slot order, sentinels excluded."""
        metric_name = parse_metric(metric)
        return self.trajectory_at(trajectory_index).retention(metric_name).neighbor_ids()

    def dump(self) -> list[dict[str, Any]]:
        return [trajectory.to_dict() for trajectory in self.trajectories]


def _validate(trajectories: Sequence[Trajectory], declared_count: int | None) -> None:
    if declared_count is not None:
        if declared_count < 0:
            raise InvalidInputError(
                f"Trajectory count must be non-negative, got: {declared_count}",
                details={"declared_count": declared_count},
            )
        if declared_count != len(trajectories):
            raise InvalidInputError(
                f"Declared {declared_count} trajectories but {len(trajectories)} were supplied",
                details={"declared_count": declared_count, "supplied": len(trajectories)},
            )

    seen: set[int] = set()
    for index, trajectory in enumerate(trajectories):
        if not isinstance(trajectory, Trajectory):
            raise InvalidInputError(
                f"Entry {index} is not a Trajectory: {type(trajectory).__name__}",
                details={"index": index},
            )
        if trajectory.id < 0:
            raise InvalidInputError(
                f"Trajectory id must be non-negative, got: {trajectory.id}",
                details={"index": index, "id": trajectory.id},
            )
        if trajectory.id in seen:
            raise InvalidInputError(
                f"Duplicate trajectory id: {trajectory.id}", details={"index": index, "id": trajectory.id}
            )
        seen.add(trajectory.id)
        if not trajectory.is_time_ordered():
            raise InvalidInputError(
                f"Trajectory {trajectory.id} samples are not sorted by timestamp",
                details={"index": index, "id": trajectory.id},
            )
        if trajectory.has_candidates():
            raise InvalidInputError(
                f"Trajectory {trajectory.id} was already classified",
                details={"index": index, "id": trajectory.id},
            )


def classify(trajectories: Sequence[Trajectory]) -> int:
    """Feed every unordered pair's length and speed diffs to both sides.

    Returns the number of pairs visited.
    """
    lengths = [trajectory.length() for trajectory in trajectories]
    speeds = [trajectory.speed() for trajectory in trajectories]

    pairs = 0
    for i in range(len(trajectories)):
        left = trajectories[i]
        for j in range(i + 1, len(trajectories)):
            right = trajectories[j]
            length_diff = abs(lengths[i] - lengths[j])
            speed_diff = abs(speeds[i] - speeds[j])

            left.submit_neighbor_candidate(METRIC_LENGTH, length_diff, right.id)
            right.submit_neighbor_candidate(METRIC_LENGTH, length_diff, left.id)
            left.submit_neighbor_candidate(METRIC_SPEED, speed_diff, right.id)
            right.submit_neighbor_candidate(METRIC_SPEED, speed_diff, left.id)
            pairs += 1
    return pairs


def load(trajectories: Sequence[Trajectory], *, declared_count: int | None = None) -> EngineState:
    """Validate a parsed trajectory set and run the single pairwise pass."""
    _validate(trajectories, declared_count)
    ordered = list(trajectories)

    logger.debug("Classifying %d trajectories (capacity %d)", len(ordered), NEIGHBOR_CAPACITY)
    pair_count = classify(ordered)
    logger.debug("Classified %d trajectory pairs", pair_count)
    return EngineState(trajectories=ordered, pair_count=pair_count)


__all__ = ["EngineState", "classify", "load"]

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from trajclass.core.constants import NEIGHBOR_CAPACITY, SENTINEL_SCORE


@dataclass(slots=True, frozen=True)
class NeighborSlot:
    score: float = SENTINEL_SCORE
    neighbor_id: int | None = None

    @property
    def is_sentinel(self) -> bool:
        return self.neighbor_id is None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class RetentionArray:
    """Fixed K-slot container fed one dissimilarity score at a time.

    A candidate is written at the first slot holding a strictly smaller
    score; the slots from there on shift right by one and the last one
    falls off. Because empty slots carry the sentinel score, the array fills
    left to right and then keeps the K largest scores seen, in descending
    order from slot 0.
    """

    capacity: int = NEIGHBOR_CAPACITY
    submitted: int = 0
    _slots: list[NeighborSlot] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._slots = [NeighborSlot() for _ in range(self.capacity)]

    def submit(self, score: float, neighbor_id: int) -> bool:
        self.submitted += 1
        for position, slot in enumerate(self._slots):
            if slot.score < score:
                self._slots[position + 1 :] = self._slots[position:-1]
                self._slots[position] = NeighborSlot(score=score, neighbor_id=neighbor_id)
                return True
        return False

    @property
    def slots(self) -> list[NeighborSlot]:
        return list(self._slots)

    def populated(self) -> list[NeighborSlot]:
        return [slot for slot in self._slots if not slot.is_sentinel]

    def neighbor_ids(self) -> list[int]:
        return [slot.neighbor_id for slot in self._slots if slot.neighbor_id is not None]

    def to_dict(self) -> list[dict[str, Any]]:
        return [slot.to_dict() for slot in self._slots]


__all__ = ["NeighborSlot", "RetentionArray"]

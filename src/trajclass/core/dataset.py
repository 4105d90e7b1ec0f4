"""Reader for the whitespace-separated trajectory text format.

Layout: the trajectory count, then for each trajectory its point count
followed by that many ``x y t`` integer triples. Any whitespace separates
tokens, so the whole dataset may sit on one line.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from trajclass.core.errors import InvalidInputError
from trajclass.core.models import Sample, Trajectory

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParsedDataset:
    declared_count: int
    trajectories: list[Trajectory] = field(default_factory=list)


class _TokenStream:
    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())
        self.position = 0

    def next_int(self, what: str) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise InvalidInputError(
                f"Unexpected end of input while reading {what}", details={"token_index": self.position}
            )
        self.position += 1
        try:
            return int(token)
        except ValueError as exc:
            raise InvalidInputError(
                f"Expected integer for {what}, got: {token!r}",
                details={"token_index": self.position - 1, "token": token},
            ) from exc

    def remaining(self) -> int:
        return sum(1 for _ in self._tokens)


def _next_count(stream: _TokenStream, what: str) -> int:
    count = stream.next_int(what)
    if count < 0:
        raise InvalidInputError(f"{what} must be non-negative, got: {count}", details={"count": count})
    return count


def parse_dataset(text: str) -> ParsedDataset:
    stream = _TokenStream(text)
    declared_count = _next_count(stream, "trajectory count")

    trajectories: list[Trajectory] = []
    for trajectory_index in range(declared_count):
        point_count = _next_count(stream, f"point count of trajectory {trajectory_index}")
        samples = [
            Sample(
                x=stream.next_int(f"x of trajectory {trajectory_index}"),
                y=stream.next_int(f"y of trajectory {trajectory_index}"),
                t=stream.next_int(f"t of trajectory {trajectory_index}"),
            )
            for _ in range(point_count)
        ]
        trajectories.append(Trajectory.from_samples(trajectory_index, samples))

    leftover = stream.remaining()
    if leftover:
        logger.warning("Ignoring %d trailing token(s) after %d trajectories", leftover, declared_count)
    logger.debug("Parsed %d trajectories", len(trajectories))
    return ParsedDataset(declared_count=declared_count, trajectories=trajectories)


def read_dataset(path: Path) -> ParsedDataset:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidInputError(f"{path}: {exc.strerror or exc}", details={"path": str(path)}) from exc
    except UnicodeDecodeError as exc:
        raise InvalidInputError(
            f"{path}: not valid UTF-8 text", details={"path": str(path), "offset": exc.start}
        ) from exc
    return parse_dataset(text)


__all__ = ["ParsedDataset", "parse_dataset", "read_dataset"]

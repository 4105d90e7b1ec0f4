from __future__ import annotations

import json
from typing import Any

from trajclass.core.constants import SUPPORTED_METRICS
from trajclass.core.engine import EngineState


def _format_score(score: float) -> str:
    return f"{score:g}"


def render_neighbor_ids(neighbor_ids: list[int]) -> str:
    return " ".join(str(neighbor_id) for neighbor_id in neighbor_ids)


def render_neighbors(trajectory_index: int, metric: str, neighbor_ids: list[int]) -> str:
    lines = [f"Retained trajectories for trajectory {trajectory_index} based on {metric}"]
    lines.append(render_neighbor_ids(neighbor_ids))
    return "\n".join(lines)


def render_classifications(state: EngineState) -> str:
    lines: list[str] = []
    dump = state.dump()
    for metric in SUPPORTED_METRICS:
        lines.append(f"{metric.capitalize()}s :")
        for index, entry in enumerate(dump):
            cells = []
            for slot in entry["neighbors"][metric]:
                neighbor = "-" if slot["neighbor_id"] is None else str(slot["neighbor_id"])
                cells.append(f"{_format_score(slot['score'])} ({neighbor})")
            lines.append(f"traj[{index}] : " + ", ".join(cells))
    return "\n".join(lines)


def render_json(state: EngineState) -> str:
    payload: dict[str, Any] = {
        "trajectory_count": len(state),
        "pair_count": state.pair_count,
        "trajectories": state.dump(),
    }
    return json.dumps(payload, indent=2, sort_keys=True)


__all__ = ["render_classifications", "render_json", "render_neighbor_ids", "render_neighbors"]

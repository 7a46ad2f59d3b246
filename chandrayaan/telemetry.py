# chandrayaan/telemetry.py
"""Telemetry snapshots for consistent state export."""

from typing import Any, Dict, List

from chandrayaan.utils.math_utils import euclidean_distance, manhattan_distance


def get_craft_telemetry(craft) -> Dict[str, Any]:
    """Get a JSON-serialisable snapshot of a craft.

    Args:
        craft: Craft object

    Returns:
        dict: Craft telemetry data
    """
    state = craft.state
    start = craft.initial.position

    return {
        "position": state.position.as_dict(),
        "facing": state.facing.value,
        "last_horizontal_facing": state.last_horizontal_facing.value,
        "initial": craft.initial.as_dict(),
        "displacement": craft.displacement().as_dict(),
        "manhattan_distance": manhattan_distance(state.position, start),
        "euclidean_distance": euclidean_distance(state.position, start),
        "at_initial": craft.is_at_initial(),
    }


def format_telemetry(snapshot: Dict[str, Any]) -> List[str]:
    """Render a telemetry snapshot as display lines."""
    pos = snapshot["position"]
    disp = snapshot["displacement"]
    return [
        f"Position: ({pos['x']}, {pos['y']}, {pos['z']})",
        f"Facing: {snapshot['facing']} (last horizontal: {snapshot['last_horizontal_facing']})",
        f"Displacement: ({disp['x']}, {disp['y']}, {disp['z']})",
        f"Distance from start: {snapshot['manhattan_distance']} moves, "
        f"{snapshot['euclidean_distance']:.2f} straight-line",
    ]

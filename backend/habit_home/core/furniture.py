"""
Associated Furniture Resolution

Maps a habit's furniture association (explicit object indices or a set of
categories) onto concrete world positions in the current room.
"""

import logging
from typing import List, Tuple

from habit_home.core.geometry import Point3
from habit_home.models.habit import HabitFurnitureSpec
from habit_home.models.room import RoomModel


logger = logging.getLogger(__name__)


def resolve_furniture(
    room: RoomModel,
    spec: HabitFurnitureSpec,
) -> Tuple[List[Point3], List[int]]:
    """
    Resolve furniture centers and report stale indices.

    When the spec lists any indices, only those objects are used and the
    category list is ignored. Indices outside the room's object list are
    skipped, not treated as errors; they usually come from a scan that
    has since been replaced.

    Returns:
        Tuple of (bounding-box world centers, skipped indices)
    """
    centers: List[Point3] = []
    skipped: List[int] = []

    if spec.uses_indices:
        for index in spec.associated_furniture_indices:
            if not 0 <= index < len(room.objects):
                logger.warning(
                    "Furniture index %d out of range (room has %d objects)",
                    index, len(room.objects),
                )
                skipped.append(index)
                continue
            centers.append(room.objects[index].bounding_box_center)
    else:
        wanted = set(spec.associated_furniture_types)
        for obj in room.objects:
            if obj.category in wanted:
                centers.append(obj.bounding_box_center)

    logger.debug("Resolved %d associated furniture items", len(centers))
    return centers, skipped


def resolve_furniture_centers(room: RoomModel, spec: HabitFurnitureSpec) -> List[Point3]:
    """World centers of the habit's associated furniture; may be empty."""
    centers, _skipped = resolve_furniture(room, spec)
    return centers

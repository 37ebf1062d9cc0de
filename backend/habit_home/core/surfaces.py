"""
Surface Candidate Extraction

Turns captured room objects into placement candidates: the top faces of
tables and storage units that sit at or below eye level.
"""

import logging
from typing import List

from habit_home.models.room import SURFACE_CATEGORIES, RoomModel
from habit_home.models.recommendation import SurfaceCandidate


logger = logging.getLogger(__name__)

EYE_LEVEL_M = 1.524
SURFACE_THICKNESS_M = 0.02


def floor_baseline(room: RoomModel) -> float:
    """
    Approximate floor height as the lowest detected object bottom.

    Returns 0.0 for a room with no objects.
    """
    if not room.objects:
        return 0.0
    return min(obj.bottom_y for obj in room.objects)


def extract_surface_candidates(
    room: RoomModel,
    eye_level: float = EYE_LEVEL_M,
    surface_thickness: float = SURFACE_THICKNESS_M,
) -> List[SurfaceCandidate]:
    """
    Collect the top faces of eligible objects, in RoomModel order.

    An object qualifies when its category is in SURFACE_CATEGORIES and the
    center of its top face, measured from the floor baseline, is no
    higher than ``eye_level``.

    Args:
        room: Captured room snapshot
        eye_level: Highest usable surface height in meters
        surface_thickness: Thickness of the placement indicator in meters

    Returns:
        Candidates carrying their original object index
    """
    if not room.objects:
        return []

    baseline_y = floor_baseline(room)
    logger.debug("Floor baseline Y: %.3f m (%d objects)", baseline_y, len(room.objects))

    candidates = []
    for index, obj in enumerate(room.objects):
        if obj.category not in SURFACE_CATEGORIES:
            logger.debug("object_%d (%s): not a surface category", index, obj.category.value)
            continue

        local_center_y = obj.dimensions.height / 2 - surface_thickness / 2
        relative_height = obj.world_origin_y + local_center_y - baseline_y
        if relative_height > eye_level:
            logger.debug(
                "object_%d (%s): top at %.3f m is above eye level",
                index, obj.category.value, relative_height,
            )
            continue

        candidates.append(SurfaceCandidate(
            source_object_index=index,
            world_center=obj.transform.apply((0.0, local_center_y, 0.0)),
        ))
        logger.debug("object_%d (%s): surface at %.3f m", index, obj.category.value, relative_height)

    logger.debug("Found %d candidate surfaces", len(candidates))
    return candidates

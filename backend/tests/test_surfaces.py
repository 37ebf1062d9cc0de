from __future__ import annotations

from habit_home.core.surfaces import extract_surface_candidates, floor_baseline
from habit_home.models.room import Dimensions, ObjectCategory, RoomModel, RoomObject, Transform


def _obj(category: ObjectCategory, origin, height: float = 0.75, transform: Transform | None = None) -> RoomObject:
    return RoomObject(
        category=category,
        dimensions=Dimensions(width=1.0, height=height, depth=0.6),
        transform=transform or Transform.from_translation(*origin),
    )


def _assert_close(actual: float, expected: float, eps: float = 1e-9) -> None:
    assert abs(float(actual) - float(expected)) <= eps


def test_empty_room_has_no_candidates():
    room = RoomModel()
    assert extract_surface_candidates(room) == []
    assert floor_baseline(room) == 0.0


def test_only_tables_and_storage_are_candidates():
    room = RoomModel(objects=[
        _obj(ObjectCategory.BED, (0, 0.25, 0), height=0.5),
        _obj(ObjectCategory.TABLE, (1, 0.375, 0)),
        _obj(ObjectCategory.SOFA, (2, 0.4, 0), height=0.8),
        _obj(ObjectCategory.STORAGE, (3, 0.5, 0), height=1.0),
        _obj(ObjectCategory.STOVE, (4, 0.45, 0), height=0.9),
    ])
    candidates = extract_surface_candidates(room)
    assert [c.source_object_index for c in candidates] == [1, 3]


def test_surfaces_above_eye_level_are_rejected():
    room = RoomModel(objects=[
        _obj(ObjectCategory.BED, (0, 0.25, 0), height=0.5),
        _obj(ObjectCategory.STORAGE, (1, 1.0, 0), height=2.0),
        _obj(ObjectCategory.TABLE, (2, 0.375, 0)),
    ])
    candidates = extract_surface_candidates(room)
    assert [c.source_object_index for c in candidates] == [2]


def test_floor_baseline_comes_from_lowest_object():
    table = _obj(ObjectCategory.TABLE, (0, 0.5, 0), height=0.2)
    assert [c.source_object_index for c in extract_surface_candidates(RoomModel(objects=[table]))] == [0]

    # A bed reaching down to y=-1 moves the floor, lifting the table above eye level
    sunken_bed = _obj(ObjectCategory.BED, (2, -0.75, 0), height=0.5)
    room = RoomModel(objects=[table, sunken_bed])
    _assert_close(floor_baseline(room), -1.0)
    assert extract_surface_candidates(room) == []


def test_eye_level_is_configurable():
    room = RoomModel(objects=[_obj(ObjectCategory.TABLE, (0, 0.375, 0))])
    assert len(extract_surface_candidates(room, eye_level=1.0)) == 1
    assert extract_surface_candidates(room, eye_level=0.5) == []


def test_world_center_is_top_face_center():
    room = RoomModel(objects=[_obj(ObjectCategory.TABLE, (2.0, 0.5, -1.0), height=1.0)])
    (candidate,) = extract_surface_candidates(room)
    x, y, z = candidate.world_center
    _assert_close(x, 2.0)
    _assert_close(y, 0.5 + 0.5 - 0.01)
    _assert_close(z, -1.0)


def test_world_center_follows_rotation():
    rotated = Transform.model_validate({
        "rotation": [[0, 0, 1], [0, 1, 0], [-1, 0, 0]],
        "translation": [1.5, 0.4, 2.0],
    })
    room = RoomModel(objects=[_obj(ObjectCategory.STORAGE, None, height=0.8, transform=rotated)])
    (candidate,) = extract_surface_candidates(room)
    x, y, z = candidate.world_center
    _assert_close(x, 1.5)
    _assert_close(y, 0.4 + 0.39)
    _assert_close(z, 2.0)

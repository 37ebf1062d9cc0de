from __future__ import annotations

from habit_home.core.furniture import resolve_furniture, resolve_furniture_centers
from habit_home.models.habit import HabitFurnitureSpec
from habit_home.models.room import Dimensions, ObjectCategory, RoomModel, RoomObject, Transform


def _obj(category: ObjectCategory, origin) -> RoomObject:
    return RoomObject(
        category=category,
        dimensions=Dimensions(width=2.0, height=0.5, depth=1.6),
        transform=Transform.from_translation(*origin),
    )


ROOM = RoomModel(objects=[
    _obj(ObjectCategory.BED, (0.0, 0.25, 0.0)),
    _obj(ObjectCategory.SOFA, (3.0, 0.4, 0.0)),
    _obj(ObjectCategory.BED, (5.0, 0.25, 1.0)),
    _obj(ObjectCategory.TABLE, (1.0, 0.375, 2.0)),
])


def test_categories_select_every_matching_object():
    spec = HabitFurnitureSpec(associated_furniture_types=[ObjectCategory.BED])
    assert resolve_furniture_centers(ROOM, spec) == [(0.0, 0.25, 0.0), (5.0, 0.25, 1.0)]


def test_indices_take_priority_over_categories():
    spec = HabitFurnitureSpec(
        associated_furniture_indices=[1],
        associated_furniture_types=[ObjectCategory.BED],
    )
    assert resolve_furniture_centers(ROOM, spec) == [(3.0, 0.4, 0.0)]


def test_indices_keep_request_order():
    spec = HabitFurnitureSpec(associated_furniture_indices=[3, 0])
    assert resolve_furniture_centers(ROOM, spec) == [(1.0, 0.375, 2.0), (0.0, 0.25, 0.0)]


def test_out_of_range_indices_are_skipped():
    spec = HabitFurnitureSpec(associated_furniture_indices=[1, 7, -1])
    centers, skipped = resolve_furniture(ROOM, spec)
    assert centers == [(3.0, 0.4, 0.0)]
    assert skipped == [7, -1]


def test_empty_spec_resolves_nothing():
    assert resolve_furniture_centers(ROOM, HabitFurnitureSpec()) == []
    assert resolve_furniture_centers(RoomModel(), HabitFurnitureSpec(associated_furniture_indices=[0])) == []

"""
Room Capture Data Models

These Pydantic models describe the static room snapshot produced by the
room-capture subsystem: categorized furniture objects with bounding
dimensions and a world transform, the walls around them, and the movement
trace recorded while scanning. They are the input contract of the
placement core and are never mutated after decoding.
"""

from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from habit_home.core.geometry import Point3, bounding_box_center, transform_point


Row4 = Tuple[float, float, float, float]
Matrix4 = Tuple[Row4, Row4, Row4, Row4]

IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class ObjectCategory(str, Enum):
    """Furniture kinds reported by the room scanner."""
    STORAGE = "storage"
    REFRIGERATOR = "refrigerator"
    STOVE = "stove"
    BED = "bed"
    SINK = "sink"
    WASHER_DRYER = "washer_dryer"
    TOILET = "toilet"
    BATHTUB = "bathtub"
    OVEN = "oven"
    DISHWASHER = "dishwasher"
    TABLE = "table"
    SOFA = "sofa"
    CHAIR = "chair"
    FIREPLACE = "fireplace"
    TELEVISION = "television"
    STAIRS = "stairs"

    @classmethod
    def _missing_(cls, value):
        # Scanner exports use camelCase ("washerDryer") and varying case
        if isinstance(value, str):
            snake = "".join("_" + c.lower() if c.isupper() else c for c in value).lstrip("_")
            for member in cls:
                if member.value in (value.lower(), snake):
                    return member
        return None


# Categories whose top face is a legitimate flat placement surface
SURFACE_CATEGORIES = frozenset({ObjectCategory.TABLE, ObjectCategory.STORAGE})


def coerce_category(value: Any) -> ObjectCategory:
    """
    Normalize a scanner category value to an ObjectCategory.

    Scanner exports encode payload-less cases as ``{"table": {}}``; plain
    strings may be snake_case or camelCase.
    """
    if isinstance(value, ObjectCategory):
        return value
    if isinstance(value, dict) and len(value) == 1:
        value = next(iter(value))
    return ObjectCategory(value)


class Dimensions(BaseModel):
    """
    Bounding dimensions in meters along the object's local axes.

    Accepts either named fields or the scanner's ``[x, y, z]`` vector.
    """
    model_config = ConfigDict(frozen=True)

    width: float = Field(..., ge=0, description="Local x extent")
    height: float = Field(..., ge=0, description="Local y extent (vertical)")
    depth: float = Field(..., ge=0, description="Local z extent")

    @model_validator(mode="before")
    @classmethod
    def _from_vector(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError("dimensions vector must have 3 components")
            width, height, depth = data
            return {"width": width, "height": height, "depth": depth}
        return data


class Transform(BaseModel):
    """
    Rigid transform from object-local space to room (world) space.

    Stored as a row-major 4x4 matrix. On input it accepts:
        - a flat list of 16 floats in column-major order (simd_float4x4),
        - a list of 4 rows of 4 floats,
        - ``{"rotation": [[...] x3], "translation": [x, y, z]}``.
    """
    model_config = ConfigDict(frozen=True)

    matrix: Matrix4 = Field(default=IDENTITY)

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            return {"matrix": _matrix_from_sequence(data)}
        if isinstance(data, dict):
            if "matrix" in data:
                return {"matrix": _matrix_from_sequence(data["matrix"])}
            if "rotation" in data or "translation" in data:
                rotation = data.get("rotation") or [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
                translation = data.get("translation") or [0, 0, 0]
                if (
                    not isinstance(rotation, (list, tuple))
                    or len(rotation) != 3
                    or any(not isinstance(row, (list, tuple)) or len(row) != 3 for row in rotation)
                ):
                    raise ValueError("rotation must be a 3x3 matrix")
                if not isinstance(translation, (list, tuple)) or len(translation) != 3:
                    raise ValueError("translation must have 3 components")
                rows = [list(rotation[i]) + [translation[i]] for i in range(3)]
                rows.append([0.0, 0.0, 0.0, 1.0])
                return {"matrix": rows}
        return data

    @classmethod
    def from_translation(cls, x: float, y: float, z: float) -> "Transform":
        return cls(translation=[x, y, z])

    @property
    def origin(self) -> Point3:
        """World position of the local origin."""
        return (self.matrix[0][3], self.matrix[1][3], self.matrix[2][3])

    def apply(self, point: Point3) -> Point3:
        """Map a local-space point into world space."""
        return transform_point(self.matrix, point)


def _matrix_from_sequence(values: Any) -> Any:
    if not isinstance(values, (list, tuple)):
        raise ValueError("transform must be 16 column-major floats or 4 rows of 4")
    values = list(values)
    if len(values) == 16 and all(not isinstance(v, (list, tuple)) for v in values):
        # column-major: element (row r, column c) sits at c * 4 + r
        return [[values[c * 4 + r] for c in range(4)] for r in range(4)]
    if len(values) == 4 and all(isinstance(v, (list, tuple)) for v in values):
        return [list(row) for row in values]
    raise ValueError("transform must be 16 column-major floats or 4 rows of 4")


class RoomObject(BaseModel):
    """
    A single captured furniture object.

    Attributes:
        category: Scanner classification of the object
        dimensions: Bounding box size in the object's local axes
        transform: Local-to-world transform; the local origin is the box center
        identifier: Optional scanner-assigned identifier
    """
    model_config = ConfigDict(frozen=True)

    category: ObjectCategory
    dimensions: Dimensions
    transform: Transform = Field(default_factory=Transform)
    identifier: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_category(cls, data: Any) -> Any:
        if isinstance(data, dict) and "category" in data:
            data = {**data, "category": coerce_category(data["category"])}
        return data

    @property
    def world_origin_y(self) -> float:
        return self.transform.origin[1]

    @property
    def bottom_y(self) -> float:
        """World height of the object's lowest face (upright objects)."""
        return self.world_origin_y - self.dimensions.height / 2

    @property
    def bounding_box_center(self) -> Point3:
        """World position of the geometric center of the local bounding box."""
        half = (self.dimensions.width / 2, self.dimensions.height / 2, self.dimensions.depth / 2)
        local_center = bounding_box_center(tuple(-h for h in half), half)
        return self.transform.apply(local_center)


class Wall(BaseModel):
    """A captured wall. Carried for the presentation layer only."""
    model_config = ConfigDict(frozen=True)

    dimensions: Dimensions
    transform: Transform = Field(default_factory=Transform)
    identifier: Optional[str] = None


class RoomModel(BaseModel):
    """Static room snapshot: walls plus categorized objects."""
    model_config = ConfigDict(frozen=True)

    walls: List[Wall] = Field(default_factory=list)
    objects: List[RoomObject] = Field(default_factory=list)


_FLAT_POSITION_KEYS = ("positionX", "positionY", "positionZ")


class PathPoint(BaseModel):
    """
    One sample of the user's movement trace.

    On the wire the position is flattened into ``positionX``,
    ``positionY`` and ``positionZ``; a nested ``position`` vector is also
    accepted when decoding.
    """
    model_config = ConfigDict(frozen=True)

    position: Point3
    timestamp: float = Field(default=0.0, ge=0, description="Seconds since capture start")
    confidence: float = Field(default=1.0, ge=0, le=1, description="Capture quality, not scored")

    @model_validator(mode="before")
    @classmethod
    def _unflatten(cls, data: Any) -> Any:
        if isinstance(data, dict) and any(key in data for key in _FLAT_POSITION_KEYS):
            if not all(key in data for key in _FLAT_POSITION_KEYS):
                raise ValueError("pathPoints need positionX, positionY and positionZ")
            data = dict(data)
            data["position"] = (
                data.pop("positionX"),
                data.pop("positionY"),
                data.pop("positionZ"),
            )
        return data

    @model_serializer
    def _flatten(self) -> dict:
        x, y, z = self.position
        return {
            "positionX": x,
            "positionY": y,
            "positionZ": z,
            "timestamp": self.timestamp,
            "confidence": self.confidence,
        }


class RoomCapture(BaseModel):
    """Persisted scan document: ``{"room": {...}, "pathPoints": [...]}``."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    room: RoomModel
    path_points: List[PathPoint] = Field(default_factory=list, alias="pathPoints")

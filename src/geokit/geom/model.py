from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias, cast

import numpy as np

from geokit.errors import InvalidGeometryError, UnsupportedFormatError
from geokit.geom.typing import (
    GeometryType,
    LineStringCoordinates,
    MultiLineStringCoordinates,
    MultiPointCoordinates,
    MultiPolygonCoordinates,
    PointCoordinates,
    PolygonCoordinates,
)
from geokit.typing import T
from geokit.utils import format_type_error

__all__ = [
    "GEOMETRY_TYPES",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Writer",
    "get_formats",
    "is_number",
    "reduce_geometries",
    "register_format",
    "unregister_format",
]

Writer: TypeAlias = Callable[["Geometry"], Any]

# 格式名到输出函数的映射，由各适配器在导入时注册。
_writers: dict[str, Writer] = {}


def register_format(name: str, writer: Writer) -> None:
    """注册 output_as 可用的输出格式。同名格式会被覆盖。"""
    if not isinstance(name, str):
        raise TypeError(format_type_error("name", name, str))
    if not callable(writer):
        raise TypeError(format_type_error("writer", writer, "callable"))
    _writers[name] = writer


def unregister_format(name: str) -> None:
    """注销输出格式"""
    try:
        del _writers[name]
    except KeyError:
        raise UnsupportedFormatError(name) from None


def get_formats() -> list[str]:
    """获取已注册的输出格式名"""
    return sorted(_writers)


def is_number(value: Any) -> bool:
    """判断是否是可以作为坐标的实数。bool 不算。"""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _to_float(name: str, value: Any) -> float:
    if not is_number(value):
        raise TypeError(format_type_error(name, value, [int, float]))
    return float(value)


def _to_components(
    name: str, values: Iterable[Any], cls: type[T] | tuple[type, ...]
) -> tuple[T, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeError(format_type_error(name, values, "iterable object"))

    components = tuple(values)
    for component in components:
        if not isinstance(component, cls):
            raise TypeError(format_type_error(f"{name} 的元素", component, cls))

    return cast(tuple[T, ...], components)


class _BaseGeometry:
    """所有几何类型共有的接口"""

    geom_type: ClassVar[GeometryType]

    def geometry_type(self) -> GeometryType:
        """几何类型的名字"""
        return self.geom_type

    def components(self) -> tuple[Geometry, ...]:
        return ()

    @property
    def is_empty(self) -> bool:
        return len(self.components()) == 0

    def output_as(self, fmt: str) -> Any:
        """
        用注册过的格式输出几何对象

        Parameters
        ----------
        fmt : str
            格式名，例如 "json"。

        Returns
        -------
        Any
            对应格式的输出函数的返回值

        Raises
        ------
        UnsupportedFormatError
            格式没有注册
        """
        try:
            writer = _writers[fmt]
        except KeyError:
            raise UnsupportedFormatError(fmt) from None
        return writer(cast(Geometry, self))


@dataclass(frozen=True)
class Point(_BaseGeometry):
    """
    点对象

    x 和 y 都为 None 时表示空点。
    """

    x: float | None = None
    y: float | None = None

    geom_type: ClassVar[GeometryType] = "Point"

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise ValueError("x 和 y 必须同时给出或同时省略")
        if self.x is not None:
            object.__setattr__(self, "x", _to_float("x", self.x))
            object.__setattr__(self, "y", _to_float("y", self.y))

    @property
    def is_empty(self) -> bool:
        return self.x is None

    def coordinates(self) -> PointCoordinates:
        if self.x is None or self.y is None:
            return []
        return [self.x, self.y]


@dataclass(frozen=True)
class LineString(_BaseGeometry):
    points: tuple[Point, ...] = ()

    geom_type: ClassVar[GeometryType] = "LineString"

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _to_components("points", self.points, Point))

    def components(self) -> tuple[Point, ...]:
        return self.points

    def coordinates(self) -> LineStringCoordinates:
        return [point.coordinates() for point in self.points]


@dataclass(frozen=True)
class Polygon(_BaseGeometry):
    """多边形对象。第一个环是外环，其余是内环。"""

    rings: tuple[LineString, ...] = ()

    geom_type: ClassVar[GeometryType] = "Polygon"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "rings", _to_components("rings", self.rings, LineString)
        )

    def components(self) -> tuple[LineString, ...]:
        return self.rings

    def coordinates(self) -> PolygonCoordinates:
        return [ring.coordinates() for ring in self.rings]


@dataclass(frozen=True)
class MultiPoint(_BaseGeometry):
    points: tuple[Point, ...] = ()

    geom_type: ClassVar[GeometryType] = "MultiPoint"

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _to_components("points", self.points, Point))

    def components(self) -> tuple[Point, ...]:
        return self.points

    def coordinates(self) -> MultiPointCoordinates:
        return [point.coordinates() for point in self.points]


@dataclass(frozen=True)
class MultiLineString(_BaseGeometry):
    lines: tuple[LineString, ...] = ()

    geom_type: ClassVar[GeometryType] = "MultiLineString"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "lines", _to_components("lines", self.lines, LineString)
        )

    def components(self) -> tuple[LineString, ...]:
        return self.lines

    def coordinates(self) -> MultiLineStringCoordinates:
        return [line.coordinates() for line in self.lines]


@dataclass(frozen=True)
class MultiPolygon(_BaseGeometry):
    polygons: tuple[Polygon, ...] = ()

    geom_type: ClassVar[GeometryType] = "MultiPolygon"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "polygons", _to_components("polygons", self.polygons, Polygon)
        )

    def components(self) -> tuple[Polygon, ...]:
        return self.polygons

    def coordinates(self) -> MultiPolygonCoordinates:
        return [polygon.coordinates() for polygon in self.polygons]


@dataclass(frozen=True)
class GeometryCollection(_BaseGeometry):
    """
    几何集合对象

    成员可以是任意几何类型，包括嵌套的 GeometryCollection，但不能为空。
    """

    geometries: tuple[Geometry, ...]

    geom_type: ClassVar[GeometryType] = "GeometryCollection"

    def __post_init__(self) -> None:
        geometries = _to_components("geometries", self.geometries, _BaseGeometry)
        if len(geometries) == 0:
            raise InvalidGeometryError("GeometryCollection 不能没有成员几何对象")
        object.__setattr__(self, "geometries", geometries)

    def components(self) -> tuple[Geometry, ...]:
        return self.geometries

    def coordinates(self) -> list[Any]:
        """各成员的坐标。GeoJSON 里不使用。"""
        return [geometry.coordinates() for geometry in self.geometries]


Geometry: TypeAlias = (
    Point
    | LineString
    | Polygon
    | MultiPoint
    | MultiLineString
    | MultiPolygon
    | GeometryCollection
)

GEOMETRY_TYPES: dict[GeometryType, type[Geometry]] = {
    "Point": Point,
    "LineString": LineString,
    "Polygon": Polygon,
    "MultiPoint": MultiPoint,
    "MultiLineString": MultiLineString,
    "MultiPolygon": MultiPolygon,
    "GeometryCollection": GeometryCollection,
}


def reduce_geometries(geometries: Iterable[Geometry]) -> Geometry:
    """
    将一组几何对象归约成一个几何对象

    - 只有一个时直接返回它。
    - 都是 Point、LineString 或 Polygon 时，包装成对应的 Multi 类型。
    - 都是同一种 Multi 类型时，合并它们的成员为一个同类型的对象。
    - 其它情况包装成 GeometryCollection，成员保持原样。

    Parameters
    ----------
    geometries : iterable object of Geometry
        一组几何对象，不能为空。

    Returns
    -------
    Geometry
        归约后的几何对象

    Raises
    ------
    InvalidGeometryError
        geometries 为空
    """
    geometries = _to_components("geometries", geometries, _BaseGeometry)
    if len(geometries) == 0:
        raise InvalidGeometryError("不能归约空的几何对象序列")
    if len(geometries) == 1:
        return geometries[0]

    geom_types = {geometry.geom_type for geometry in geometries}
    if len(geom_types) > 1:
        return GeometryCollection(geometries)

    match geom_types.pop():
        case "Point":
            return MultiPoint(cast(tuple[Point, ...], geometries))
        case "LineString":
            return MultiLineString(cast(tuple[LineString, ...], geometries))
        case "Polygon":
            return MultiPolygon(cast(tuple[Polygon, ...], geometries))
        case "MultiPoint" | "MultiLineString" | "MultiPolygon" as geom_type:
            parts = [part for geometry in geometries for part in geometry.components()]
            return GEOMETRY_TYPES[geom_type](parts)  # pyright: ignore[reportCallIssue]
        case _:
            return GeometryCollection(geometries)

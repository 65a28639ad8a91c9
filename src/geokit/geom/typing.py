from __future__ import annotations

from typing import Any, Literal, TypeAlias, Union

from typing_extensions import NotRequired, TypedDict

__all__ = [
    "FeatureCollectionDict",
    "FeatureDict",
    "GeometryCollectionDict",
    "GeometryDict",
    "GeometryType",
    "LineStringCoordinates",
    "LineStringDict",
    "MultiLineStringCoordinates",
    "MultiLineStringDict",
    "MultiPointCoordinates",
    "MultiPointDict",
    "MultiPolygonCoordinates",
    "MultiPolygonDict",
    "PointCoordinates",
    "PointDict",
    "PolygonCoordinates",
    "PolygonDict",
]

GeometryType: TypeAlias = Literal[
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
]

# 空点的坐标是空列表
PointCoordinates: TypeAlias = list[float]
MultiPointCoordinates: TypeAlias = list[PointCoordinates]
LineStringCoordinates: TypeAlias = list[PointCoordinates]
MultiLineStringCoordinates: TypeAlias = list[LineStringCoordinates]
PolygonCoordinates: TypeAlias = list[LineStringCoordinates]
MultiPolygonCoordinates: TypeAlias = list[PolygonCoordinates]


class PointDict(TypedDict, extra_items=Any):
    type: Literal["Point"]
    coordinates: PointCoordinates
    bbox: NotRequired[list[float]]


class MultiPointDict(TypedDict, extra_items=Any):
    type: Literal["MultiPoint"]
    coordinates: MultiPointCoordinates
    bbox: NotRequired[list[float]]


class LineStringDict(TypedDict, extra_items=Any):
    type: Literal["LineString"]
    coordinates: LineStringCoordinates
    bbox: NotRequired[list[float]]


class MultiLineStringDict(TypedDict, extra_items=Any):
    type: Literal["MultiLineString"]
    coordinates: MultiLineStringCoordinates
    bbox: NotRequired[list[float]]


class PolygonDict(TypedDict, extra_items=Any):
    type: Literal["Polygon"]
    coordinates: PolygonCoordinates
    bbox: NotRequired[list[float]]


class MultiPolygonDict(TypedDict, extra_items=Any):
    type: Literal["MultiPolygon"]
    coordinates: MultiPolygonCoordinates
    bbox: NotRequired[list[float]]


# X | Y 不支持部分前向引用
GeometryDict: TypeAlias = Union[
    PointDict,
    MultiPointDict,
    LineStringDict,
    MultiLineStringDict,
    PolygonDict,
    MultiPolygonDict,
    "GeometryCollectionDict",
]


class GeometryCollectionDict(TypedDict, extra_items=Any):
    type: Literal["GeometryCollection"]
    geometries: list[GeometryDict]
    bbox: NotRequired[list[float]]


class FeatureDict(TypedDict, extra_items=Any):
    type: Literal["Feature"]
    geometry: GeometryDict
    properties: dict[str, Any] | None
    bbox: NotRequired[list[float]]


class FeatureCollectionDict(TypedDict, extra_items=Any):
    type: Literal["FeatureCollection"]
    features: list[FeatureDict]
    bbox: NotRequired[list[float]]

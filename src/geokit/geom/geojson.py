from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias, Union, cast, overload

import numpy as np
from loguru import logger

from geokit.conf import config
from geokit.errors import (
    InvalidGeometryError,
    MalformedInputError,
    UnsupportedGeometryTypeError,
)
from geokit.geom.model import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    is_number,
    reduce_geometries,
    register_format,
)
from geokit.geom.typing import (
    FeatureCollectionDict,
    FeatureDict,
    GeometryCollectionDict,
    GeometryDict,
    LineStringDict,
    MultiLineStringDict,
    MultiPointDict,
    MultiPolygonDict,
    PointDict,
    PolygonDict,
)
from geokit.utils import format_literal_error, format_type_error

__all__ = [
    "GeoJSONCodec",
    "GeoJSONSource",
    "PointConverter",
    "dict_to_geometry",
    "dumps_geojson",
    "geometry_to_dict",
]

PointConverter: TypeAlias = Callable[[Point], Point]

# 已解析的 GeoJSON 对象或者 JSON 文本
GeoJSONSource: TypeAlias = Union[
    GeometryDict,
    FeatureDict,
    FeatureCollectionDict,
    Mapping[str, Any],
    str,
    bytes,
    bytearray,
]

_GEOMETRY_CLASSES = (
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, np.ndarray))


def _as_sequence(name: str, value: Any) -> Sequence[Any]:
    if not _is_sequence(value):
        raise InvalidGeometryError(format_type_error(name, value, list))
    return value


class GeoJSONCodec:
    """
    GeoJSON 和几何对象互相转换的类

    读取时总是返回一个几何对象：Feature 只保留 geometry，
    FeatureCollection 会把所有要素的几何对象归约成一个。

    Parameters
    ----------
    convert_point : callable or None, default None
        对每个读取出的非空点调用一次的函数，接受并返回 Point，例如用来做坐标变换。
        默认为 None，表示不做处理。

    max_depth : int or None, default None
        Feature、FeatureCollection 和 GeometryCollection 允许嵌套的最大层数。
        默认为 None，表示使用 config.max_depth。

    strict_features : bool or None, default None
        是否要求 FeatureCollection 的成员都是 Feature。
        默认为 None，表示使用 config.strict_features。
    """

    def __init__(
        self,
        convert_point: PointConverter | None = None,
        max_depth: int | None = None,
        strict_features: bool | None = None,
    ) -> None:
        if convert_point is not None and not callable(convert_point):
            raise TypeError(
                format_type_error("convert_point", convert_point, "callable")
            )

        if max_depth is None:
            max_depth = config.max_depth
        else:
            config.validate("max_depth", max_depth)

        if strict_features is None:
            strict_features = config.strict_features
        else:
            config.validate("strict_features", strict_features)

        self._convert_point = convert_point
        self._max_depth = max_depth
        self._strict_features = strict_features

    @property
    def convert_point(self) -> PointConverter | None:
        return self._convert_point

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def strict_features(self) -> bool:
        return self._strict_features

    def read(self, source: GeoJSONSource) -> Geometry:
        """
        读取 GeoJSON 文本或已解析的字典，返回一个几何对象。

        Raises
        ------
        MalformedInputError
            文本不是合法的 JSON

        InvalidGeometryError
            结构不符合 GeoJSON 的要求

        UnsupportedGeometryTypeError
            type 不是已知的几何类型
        """
        if isinstance(source, (str, bytes, bytearray)):
            try:
                source = json.loads(source)
            except (ValueError, RecursionError) as e:
                raise MalformedInputError(f"无法解析 JSON 文本：{e}") from e

        return self._read(source, 1)

    def write(self, geometry: Geometry) -> GeometryDict:
        """几何对象转为 GeoJSON 的 geometry 字典"""
        return geometry_to_dict(geometry)

    def write_text(self, geometry: Geometry, **kwargs: Any) -> str:
        """几何对象转为 GeoJSON 文本。kwargs 会传给 json.dumps。"""
        return json.dumps(self.write(geometry), **kwargs)

    def _check_object(self, obj: Any, depth: int) -> str:
        if depth > self._max_depth:
            raise InvalidGeometryError(f"GeoJSON 嵌套超过了 {self._max_depth} 层")
        if not isinstance(obj, Mapping):
            raise InvalidGeometryError(format_type_error("GeoJSON 对象", obj, dict))

        geometry_type = obj.get("type")
        if not isinstance(geometry_type, str):
            raise InvalidGeometryError("GeoJSON 对象缺少字符串类型的 type 成员")

        return geometry_type

    def _read(self, obj: Any, depth: int) -> Geometry:
        match self._check_object(obj, depth):
            case "FeatureCollection":
                return self._read_feature_collection(obj, depth)
            case "Feature":
                # properties、id 和 bbox 都会被丢弃
                if "geometry" not in obj:
                    raise InvalidGeometryError("Feature 缺少 geometry 成员")
                return self._read(obj["geometry"], depth + 1)
            case _:
                return self._obj_to_geometry(obj, depth)

    def _read_feature_collection(self, obj: Mapping[str, Any], depth: int) -> Geometry:
        if "features" not in obj:
            raise InvalidGeometryError("FeatureCollection 缺少 features 成员")

        geometries: list[Geometry] = []
        for feature in _as_sequence("features", obj["features"]):
            if (
                self._strict_features
                and isinstance(feature, Mapping)
                and feature.get("type") != "Feature"
            ):
                raise InvalidGeometryError(
                    format_literal_error(
                        "features 的成员的 type", feature.get("type"), "Feature"
                    )
                )
            geometries.append(self._read(feature, depth + 1))

        geometry = reduce_geometries(geometries)
        logger.debug(
            f"FeatureCollection 含 {len(geometries)} 个要素，归约为 {geometry.geom_type}"
        )

        return geometry

    def _obj_to_geometry(self, obj: Any, depth: int) -> Geometry:
        match geometry_type := self._check_object(obj, depth):
            case "GeometryCollection":
                return self._obj_to_geometry_collection(obj, depth)
            case "Point":
                return self._array_to_point(self._get_coordinates(obj))
            case "LineString":
                return self._array_to_line_string(self._get_coordinates(obj))
            case "Polygon":
                return self._array_to_polygon(self._get_coordinates(obj))
            case "MultiPoint":
                return self._array_to_multi_point(self._get_coordinates(obj))
            case "MultiLineString":
                return self._array_to_multi_line_string(self._get_coordinates(obj))
            case "MultiPolygon":
                return self._array_to_multi_polygon(self._get_coordinates(obj))
            case _:
                raise UnsupportedGeometryTypeError(geometry_type)

    @staticmethod
    def _get_coordinates(obj: Mapping[str, Any]) -> Any:
        if "coordinates" not in obj:
            raise InvalidGeometryError(f"{obj['type']} 缺少 coordinates 成员")
        return obj["coordinates"]

    def _array_to_point(self, array: Any) -> Point:
        array = _as_sequence("Point 的坐标", array)
        if len(array) == 0:
            return Point()
        if len(array) < 2:
            raise InvalidGeometryError(f"Point 的坐标至少要有两个数值：{array!r}")

        # 第三个及之后的数值（例如高程）直接忽略
        x, y = array[0], array[1]
        if not (is_number(x) and is_number(y)):
            raise InvalidGeometryError(f"Point 的坐标必须是数值：{array!r}")

        try:
            point = Point(x, y)
        except OverflowError as e:
            raise InvalidGeometryError(f"Point 的坐标超出浮点数范围：{array!r}") from e

        if self._convert_point is not None:
            point = self._convert_point(point)
            if not isinstance(point, Point):
                raise TypeError(
                    format_type_error("convert_point 的返回值", point, Point)
                )

        return point

    def _array_to_line_string(self, array: Any) -> LineString:
        array = _as_sequence("LineString 的坐标", array)
        return LineString(list(map(self._array_to_point, array)))

    def _array_to_polygon(self, array: Any) -> Polygon:
        array = _as_sequence("Polygon 的坐标", array)
        return Polygon(list(map(self._array_to_line_string, array)))

    def _array_to_multi_point(self, array: Any) -> MultiPoint:
        array = _as_sequence("MultiPoint 的坐标", array)
        return MultiPoint(list(map(self._array_to_point, array)))

    def _array_to_multi_line_string(self, array: Any) -> MultiLineString:
        array = _as_sequence("MultiLineString 的坐标", array)
        return MultiLineString(list(map(self._array_to_line_string, array)))

    def _array_to_multi_polygon(self, array: Any) -> MultiPolygon:
        array = _as_sequence("MultiPolygon 的坐标", array)
        return MultiPolygon(list(map(self._array_to_polygon, array)))

    def _obj_to_geometry_collection(
        self, obj: Mapping[str, Any], depth: int
    ) -> GeometryCollection:
        geometries = obj.get("geometries")
        if geometries is None or (_is_sequence(geometries) and len(geometries) == 0):
            raise InvalidGeometryError(
                "GeometryCollection 不能没有成员几何对象 (geometries)"
            )
        geometries = _as_sequence("geometries", geometries)

        return GeometryCollection(
            [self._obj_to_geometry(member, depth + 1) for member in geometries]
        )


@overload
def geometry_to_dict(geometry: Point) -> PointDict: ...


@overload
def geometry_to_dict(geometry: MultiPoint) -> MultiPointDict: ...


@overload
def geometry_to_dict(geometry: LineString) -> LineStringDict: ...


@overload
def geometry_to_dict(geometry: MultiLineString) -> MultiLineStringDict: ...


@overload
def geometry_to_dict(geometry: Polygon) -> PolygonDict: ...


@overload
def geometry_to_dict(geometry: MultiPolygon) -> MultiPolygonDict: ...


@overload
def geometry_to_dict(geometry: GeometryCollection) -> GeometryCollectionDict: ...


def geometry_to_dict(geometry: Geometry) -> GeometryDict:
    """
    几何对象转为 GeoJSON 的 geometry 字典

    GeometryCollection 的成员递归转换，嵌套的 GeometryCollection 也用 geometries 成员表示。
    """
    match geometry:
        case GeometryCollection():
            return {
                "type": "GeometryCollection",
                "geometries": list(map(geometry_to_dict, geometry.geometries)),
            }
        case (
            Point()
            | LineString()
            | Polygon()
            | MultiPoint()
            | MultiLineString()
            | MultiPolygon()
        ):
            return cast(
                GeometryDict,
                {"type": geometry.geometry_type(), "coordinates": geometry.coordinates()},
            )
        case _:
            raise TypeError(format_type_error("geometry", geometry, _GEOMETRY_CLASSES))


def dict_to_geometry(geometry_dict: GeoJSONSource) -> Geometry:
    """
    GeoJSON 的字典或文本转为几何对象

    使用当前的全局配置，不做点的变换。

    See Also
    --------
    GeoJSONCodec.read
    """
    return GeoJSONCodec().read(geometry_dict)


def dumps_geojson(geometry: Geometry, **kwargs: Any) -> str:
    """几何对象转为 GeoJSON 文本。kwargs 会传给 json.dumps。"""
    return json.dumps(geometry_to_dict(geometry), **kwargs)


register_format("json", geometry_to_dict)

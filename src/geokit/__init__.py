from __future__ import annotations

from loguru import logger

from geokit.conf import config
from geokit.errors import (
    GeometryError,
    InvalidGeometryError,
    MalformedInputError,
    UnsupportedFormatError,
    UnsupportedGeometryTypeError,
)
from geokit.geom.geojson import (
    GeoJSONCodec,
    dict_to_geometry,
    dumps_geojson,
    geometry_to_dict,
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
    get_formats,
    reduce_geometries,
    register_format,
    unregister_format,
)

__version__ = "0.1.0"

__all__ = [
    "GeoJSONCodec",
    "Geometry",
    "GeometryCollection",
    "GeometryError",
    "InvalidGeometryError",
    "LineString",
    "MalformedInputError",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "UnsupportedFormatError",
    "UnsupportedGeometryTypeError",
    "config",
    "dict_to_geometry",
    "dumps_geojson",
    "geometry_to_dict",
    "get_formats",
    "reduce_geometries",
    "register_format",
    "unregister_format",
]

# 库内的日志默认不输出，需要时调用 logger.enable("geokit")
logger.disable("geokit")

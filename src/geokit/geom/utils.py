from __future__ import annotations

import shapely
import shapely.geometry as sgeom
from shapely.geometry.base import BaseGeometry

from geokit.geom.geojson import GeoJSONCodec, geometry_to_dict
from geokit.geom.model import Geometry
from geokit.utils import format_type_error

__all__ = ["from_shapely", "to_shapely"]


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """
    几何对象转为 shapely 的几何对象

    See Also
    --------
    shapely.geometry.shape
    """
    return sgeom.shape(geometry_to_dict(geometry))


def from_shapely(
    geometry: BaseGeometry, codec: GeoJSONCodec | None = None
) -> Geometry:
    """
    shapely 的几何对象转为几何对象

    Parameters
    ----------
    geometry : BaseGeometry
        shapely 的几何对象。z 坐标会被丢弃。

    codec : GeoJSONCodec or None, default None
        用来读取 geometry 字典的对象。默认为 None，表示用默认参数新建一个。

    Returns
    -------
    Geometry
        几何对象

    See Also
    --------
    shapely.geometry.mapping
    """
    if isinstance(geometry, shapely.LinearRing):
        raise TypeError(
            "geometry 是 shapely.LinearRing 类型，"
            "需要先转换成 shapely.LineString 或 shapely.Polygon 类型"
        )
    if not isinstance(geometry, BaseGeometry):
        raise TypeError(format_type_error("geometry", geometry, BaseGeometry))

    if codec is None:
        codec = GeoJSONCodec()

    return codec.read(sgeom.mapping(geometry))

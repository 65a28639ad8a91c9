"""与 shapely 互相转换，借用 shapely 计算面积"""

import shapely

import geokit
from geokit.geom.utils import from_shapely, to_shapely

# 临时放宽 FeatureCollection 的要求
with geokit.config.context(strict_features=False):
    geometry = geokit.dict_to_geometry(
        {
            "type": "FeatureCollection",
            "features": [
                {"type": "Polygon", "coordinates": [[[0, 0], [2, 0], [2, 2], [0, 0]]]},
                {"type": "Polygon", "coordinates": [[[3, 3], [4, 3], [4, 4], [3, 3]]]},
            ],
        }
    )

multi_polygon = to_shapely(geometry)
print(multi_polygon.geom_type, multi_polygon.area)

buffered = from_shapely(shapely.Point(0, 0).buffer(1, quad_segs=4))
print(buffered.geometry_type(), len(buffered.coordinates()[0]))

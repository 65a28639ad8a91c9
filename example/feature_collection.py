"""读取 FeatureCollection，所有要素的几何对象会被归约成一个"""

import json

import geokit

geojson_text = json.dumps(
    {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [116.4, 39.9]},
                "properties": {"name": "北京"},
            },
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [121.5, 31.2]},
                "properties": {"name": "上海"},
            },
        ],
    },
    ensure_ascii=False,
)

# 同类型的点归约成 MultiPoint，properties 被丢弃
geometry = geokit.dict_to_geometry(geojson_text)
assert isinstance(geometry, geokit.MultiPoint)
print(geometry.output_as("json"))

# 混合类型归约成 GeometryCollection
geometry = geokit.reduce_geometries(
    [*geometry.points, geokit.LineString(geometry.points)]
)
print(geokit.dumps_geojson(geometry))

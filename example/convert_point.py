"""读取时对每个点做坐标变换：经纬度转为 Web 墨卡托"""

import math

import geokit

EARTH_RADIUS = 6378137


def lonlat_to_mercator(point: geokit.Point) -> geokit.Point:
    assert point.x is not None and point.y is not None
    x = math.radians(point.x) * EARTH_RADIUS
    y = math.log(math.tan(math.pi / 4 + math.radians(point.y) / 2)) * EARTH_RADIUS
    return geokit.Point(x, y)


codec = geokit.GeoJSONCodec(convert_point=lonlat_to_mercator)
polygon = codec.read(
    {
        "type": "Polygon",
        "coordinates": [[[110, 20], [120, 20], [120, 30], [110, 30], [110, 20]]],
    }
)
print(codec.write_text(polygon, indent=2))

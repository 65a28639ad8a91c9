from unittest import TestCase

import shapely

from geokit.errors import InvalidGeometryError
from geokit.geom.geojson import GeoJSONCodec
from geokit.geom.model import (
    GeometryCollection,
    LineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geokit.geom.utils import from_shapely, to_shapely
from geokit.utils import format_literal_error, format_type_error, join_with_cn_comma


class TestShapely(TestCase):
    def test_from_shapely(self) -> None:
        polygon = shapely.box(0, 0, 1, 1)
        geometry = from_shapely(polygon)
        assert isinstance(geometry, Polygon)
        self.assertEqual(len(geometry.rings), 1)
        self.assertEqual(len(geometry.rings[0].points), 5)

        geometry = from_shapely(shapely.MultiPoint([(0, 0), (1, 1)]))
        self.assertEqual(geometry, MultiPoint([Point(0, 0), Point(1, 1)]))

    def test_drop_z(self) -> None:
        self.assertEqual(from_shapely(shapely.Point(1, 2, 3)), Point(1, 2))

    def test_to_shapely(self) -> None:
        line = LineString([Point(0, 0), Point(1, 1)])
        self.assertTrue(to_shapely(line).equals(shapely.LineString([(0, 0), (1, 1)])))

        collection = GeometryCollection([Point(0, 0), line])
        actual = to_shapely(collection)
        self.assertIsInstance(actual, shapely.GeometryCollection)
        self.assertEqual(len(actual.geoms), 2)  # type: ignore

    def test_round_trip(self) -> None:
        polygons = [shapely.box(0, 0, 1, 1), shapely.box(2, 2, 3, 3)]
        multi_polygon = shapely.MultiPolygon(polygons)
        geometry = from_shapely(multi_polygon)
        self.assertIsInstance(geometry, MultiPolygon)
        self.assertTrue(to_shapely(geometry).equals(multi_polygon))

    def test_codec(self) -> None:
        codec = GeoJSONCodec(convert_point=lambda point: Point(point.x + 1, point.y))  # type: ignore
        self.assertEqual(from_shapely(shapely.Point(1, 2), codec), Point(2, 2))

    def test_invalid(self) -> None:
        with self.assertRaises(TypeError):
            from_shapely(shapely.LinearRing([(0, 0), (1, 0), (1, 1)]))
        with self.assertRaises(TypeError):
            from_shapely([0, 0])  # type: ignore
        with self.assertRaises(InvalidGeometryError):
            from_shapely(shapely.GeometryCollection())


class TestFormat(TestCase):
    def test_join_with_cn_comma(self) -> None:
        self.assertEqual(join_with_cn_comma(["a"]), "a")
        self.assertEqual(join_with_cn_comma(["a", "b", "c"]), "a、b 或 c")

    def test_format_type_error(self) -> None:
        msg = format_type_error("x", "1", [int, float])
        self.assertEqual(msg, "x 必须是 int 或 float 类型，但传入的是 str 类型")
        with self.assertRaises(ValueError):
            format_type_error("x", 1, [])

    def test_format_literal_error(self) -> None:
        msg = format_literal_error("type", "Circle", "Feature")
        self.assertEqual(msg, "type 只能是 {'Feature'} 中的一项，但传入的是 'Circle'")

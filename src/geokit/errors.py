from __future__ import annotations

__all__ = [
    "GeometryError",
    "InvalidGeometryError",
    "MalformedInputError",
    "UnsupportedFormatError",
    "UnsupportedGeometryTypeError",
]


class GeometryError(ValueError):
    """geokit 所有几何相关错误的基类"""


class MalformedInputError(GeometryError):
    """输入文本无法被解析为 JSON"""


class InvalidGeometryError(GeometryError):
    """输入值的结构不符合 GeoJSON 的要求"""


class UnsupportedGeometryTypeError(GeometryError):
    """type 不是已知的几何类型"""

    def __init__(self, geometry_type: str) -> None:
        self.geometry_type = geometry_type
        super().__init__(f"不支持的几何类型：{geometry_type!r}")


class UnsupportedFormatError(GeometryError):
    """输出格式没有注册"""

    def __init__(self, fmt: str) -> None:
        self.fmt = fmt
        super().__init__(f"未注册的输出格式：{fmt!r}")

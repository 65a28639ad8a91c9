from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict, dataclass, fields
from typing import Any, TypedDict, cast

from typing_extensions import Unpack

from geokit.utils import format_type_error

__all__ = ["Config", "ConfigDict", "config"]


def _validate_positive_int(name: str, value: Any) -> None:
    # bool 是 int 的子类
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(format_type_error(name, value, int))
    if value <= 0:
        raise ValueError(f"{name} 必须大于 0，但传入的是 {value}")


def _validate_bool(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise TypeError(format_type_error(name, value, bool))


class ConfigDict(TypedDict):
    max_depth: int
    strict_features: bool


class PartialConfigDict(TypedDict, total=False):
    max_depth: int
    strict_features: bool


@dataclass(kw_only=True)
class Config:
    """
    表示全局配置的类

    Attributes
    ----------
    max_depth : int, default 128
        读取 GeoJSON 时 Feature、FeatureCollection 和 GeometryCollection
        允许嵌套的最大层数。

    strict_features : bool, default True
        是否要求 FeatureCollection 的成员都是 Feature。
        为 False 时也接受直接放在 features 里的几何对象。
    """

    max_depth: int = 128
    strict_features: bool = True

    def __post_init__(self) -> None:
        self._field_names = {field.name for field in fields(self)}
        for name in self._field_names:
            self._validate(name, getattr(self, name))

    def assert_field(self, name: str) -> None:
        """断言名字是否属于配置字段"""
        if name not in self._field_names:
            raise ValueError(f"不存在的配置：{name}")

    def _validate(self, name: str, value: Any) -> None:
        match name:
            case "max_depth":
                _validate_positive_int(name, value)
            case "strict_features":
                _validate_bool(name, value)

    def validate(self, name: str, value: Any) -> None:
        """校验一条配置"""
        self.assert_field(name)
        self._validate(name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        # 允许设置非字段的属性
        self._validate(name, value)
        super().__setattr__(name, value)

    def to_dict(self) -> ConfigDict:
        """将配置转换为字典"""
        return cast(ConfigDict, asdict(self))

    def update(self, **kwargs: Unpack[PartialConfigDict]) -> None:
        """更新配置"""
        # 校验完再更新，避免校验失败导致部分更新
        for name, value in kwargs.items():
            self.validate(name, value)
        for name, value in kwargs.items():
            super().__setattr__(name, value)

    @contextmanager
    def context(self, **kwargs: Unpack[PartialConfigDict]) -> Iterator[None]:
        """创建可以临时修改配置的上下文"""
        config_dict = self.to_dict()
        try:
            self.update(**kwargs)
            yield
        finally:
            self.update(**config_dict)


config = Config()

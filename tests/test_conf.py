from unittest import TestCase

from geokit.conf import Config


class TestConfig(TestCase):
    def setUp(self) -> None:
        self.config = Config()

    def test_default(self) -> None:
        self.assertEqual(
            self.config.to_dict(), {"max_depth": 128, "strict_features": True}
        )

    def test_setattr(self) -> None:
        self.config.max_depth = 10
        self.assertEqual(self.config.max_depth, 10)
        with self.assertRaises(ValueError):
            self.config.max_depth = -1
        with self.assertRaises(TypeError):
            self.config.max_depth = True
        with self.assertRaises(TypeError):
            self.config.strict_features = "yes"  # type: ignore

    def test_update(self) -> None:
        # 校验失败时不会部分更新
        with self.assertRaises(TypeError):
            self.config.update(max_depth=10, strict_features=None)  # type: ignore
        self.assertEqual(self.config.max_depth, 128)

        with self.assertRaises(ValueError):
            self.config.update(data_source="amap")  # type: ignore

    def test_context(self) -> None:
        with self.config.context(max_depth=8, strict_features=False):
            self.assertEqual(self.config.max_depth, 8)
            self.assertFalse(self.config.strict_features)
        self.assertEqual(self.config.max_depth, 128)
        self.assertTrue(self.config.strict_features)

    def test_invalid_init(self) -> None:
        with self.assertRaises(ValueError):
            Config(max_depth=0)

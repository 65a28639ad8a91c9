import runpy
from pathlib import Path
from unittest import TestCase

from loguru import logger


class TestExample(TestCase):
    def test_run(self) -> None:
        """运行 example 目录下的所有示例脚本"""
        example_dir = Path(__file__).parent.parent / "example"
        filepaths = sorted(example_dir.glob("*.py"))
        self.assertGreater(len(filepaths), 0)
        for filepath in filepaths:
            with self.subTest(name=filepath.stem):
                try:
                    runpy.run_path(str(filepath), run_name="__main__")
                    logger.info(filepath.stem)
                except Exception:
                    logger.exception(filepath.stem)
                    raise

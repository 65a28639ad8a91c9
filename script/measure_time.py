"""测量读写大型 FeatureCollection 的耗时"""

from __future__ import annotations

import json
import timeit
from functools import partial
from typing import Literal

import numpy as np
from loguru import logger
from typing_extensions import assert_never

import geokit


def make_feature_collection(
    num_features: int, num_points: int, kind: Literal["point", "polygon"]
) -> dict:
    rng = np.random.default_rng(0)
    features = []
    for _ in range(num_features):
        match kind:
            case "point":
                geometry = {
                    "type": "Point",
                    "coordinates": rng.uniform(-180, 180, 2).tolist(),
                }
            case "polygon":
                ring = rng.uniform(-90, 90, (num_points, 2)).tolist()
                ring.append(ring[0])
                geometry = {"type": "Polygon", "coordinates": [ring]}
            case _:
                assert_never(kind)
        features.append({"type": "Feature", "geometry": geometry, "properties": {}})

    return {"type": "FeatureCollection", "features": features}


def main() -> None:
    logger.enable("geokit")
    codec = geokit.GeoJSONCodec()
    for kind in ("point", "polygon"):
        for num_features in (100, 1000, 10000):
            obj = make_feature_collection(num_features, 50, kind)
            text = json.dumps(obj)
            geometry = codec.read(text)

            read_times = timeit.repeat(partial(codec.read, text), number=1, repeat=3)
            write_times = timeit.repeat(
                partial(codec.write_text, geometry), number=1, repeat=3
            )
            logger.info(
                f"{kind=}, {num_features=}, "
                f"read={min(read_times):.3f}s, write={min(write_times):.3f}s"
            )


if __name__ == "__main__":
    main()

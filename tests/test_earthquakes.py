import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "earthquakes.py"


@pytest.fixture(scope="module")
def earthquakes():
    spec = importlib.util.spec_from_file_location("earthquakes", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def feed(tmp_path):
    features = [
        {
            "type": "Feature",
            "properties": {"mag": 2.1, "place": "10 km N of Ridgecrest, CA"},
            "geometry": {"type": "Point", "coordinates": [-117.6, 35.7, 8.2]},
        },
        {
            "type": "Feature",
            "properties": {"mag": 4.5, "place": None},
            "geometry": {"type": "Point", "coordinates": [142.3, 38.1, 30.0]},
        },
    ]
    path = tmp_path / "feed.geojson"
    path.write_text(json.dumps({"type": "FeatureCollection", "features": features}))
    return path


def test_load_features(earthquakes, feed):
    df = earthquakes.load_features(str(feed))

    assert list(df["latitude"]) == [35.7, 38.1]
    assert list(df["longitude"]) == [-117.6, 142.3]
    assert list(df["depth"]) == [8.2, 30.0]


def test_missing_place_becomes_empty(earthquakes, feed):
    vectors = earthquakes.features_to_vectors(earthquakes.load_features(str(feed)))

    assert vectors[0].place == "10 km N of Ridgecrest, CA"
    assert vectors[1].place == ""
    assert vectors[1].signature == "38.100000-142.300000-30.000000"

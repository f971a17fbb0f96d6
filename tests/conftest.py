from pathlib import Path

import pytest
from PIL import Image

from tiassets import AssetGenerator


class RecordingOptimizer:
    """Stands in for optipng and remembers every batch it was given."""

    def __init__(self):
        self.calls = []

    def optimize(self, paths, level):
        self.calls.append((list(paths), level))


@pytest.fixture
def optimizer():
    return RecordingOptimizer()


@pytest.fixture
def make_image(tmp_path):
    def _make(name, size=(1024, 1024), color=(200, 30, 30, 255), mode="RGBA", **save_args):
        path = tmp_path / "src" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color).save(path, **save_args)
        return path

    return _make


@pytest.fixture
def out_dir(tmp_path) -> Path:
    return tmp_path / "project"


@pytest.fixture
def generator(out_dir, optimizer):
    return AssetGenerator(out_dir, optimizer=optimizer)

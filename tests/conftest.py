from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from sizeplot.utils.config import Config
from sizeplot.utils.statistics import Distribution


def write_sized_file(path: Path, size: int) -> Path:
    """Helper to create a file of exactly ``size`` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture(autouse=True)
def reset_config() -> Generator[None, None, None]:
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def quartile_distribution() -> Distribution:
    return Distribution(min=0, max=100, median=50.0, lower_quartile=25.0, upper_quartile=75.0)


@pytest.fixture
def sized_tree(tmp_path: Path) -> Path:
    """A small directory tree with files on both sides of the 4096 byte threshold."""
    root = tmp_path / "tree"
    write_sized_file(root / "tiny.txt", 10)
    write_sized_file(root / "exact.bin", 4096)
    write_sized_file(root / "a.bin", 5000)
    write_sized_file(root / "nested" / "b.bin", 8192)
    write_sized_file(root / "nested" / "deeper" / "c.bin", 12000)
    write_sized_file(root / "nested" / "deeper" / "d.bin", 20000)
    return root

"""Shared test fixtures."""

from __future__ import annotations

import pytest

import dirtally.core.aggregator as aggregator


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temp directory."""
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "dirtally" / "settings.json"


@pytest.fixture(params=["find", "scandir"])
def walker(request, monkeypatch):
    """Run a test against both the find and the scandir backends."""
    if request.param == "scandir":
        def no_find(path_str):
            raise FileNotFoundError("find")

        monkeypatch.setattr(aggregator, "_size_find", no_find)
    return request.param


@pytest.fixture
def sample_tree(tmp_path):
    """Directory with files a (500 B), b (2000 B) and an empty subdirectory c."""
    root = tmp_path / "sample"
    root.mkdir()
    (root / "a").write_bytes(b"a" * 500)
    (root / "b").write_bytes(b"b" * 2000)
    (root / "c").mkdir()
    return root


@pytest.fixture
def nested_tree(tmp_path):
    """Directory tree with nested files; regular files sum to 1234 bytes."""
    root = tmp_path / "nested"
    (root / "one" / "two" / "three").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "top.bin").write_bytes(b"x" * 1000)
    (root / "one" / "mid.txt").write_bytes(b"y" * 200)
    (root / "one" / "two" / "three" / "deep.dat").write_bytes(b"z" * 34)
    return root

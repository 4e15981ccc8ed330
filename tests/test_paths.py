"""Tests for path building and source file walking."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from fqnfinder.errors import InvalidRemainderError
from fqnfinder.namespace import Namespace
from fqnfinder.paths import PathBuilder, construct_name_for, walk_source_files


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")


class TestPathBuilder:
    def test_appends_remainder_to_base(self):
        builder = PathBuilder("/src/shop", Namespace("shop"))
        assert builder.resolve("shop.models.orders") == os.path.join(
            "/src/shop", "models", "orders"
        )

    def test_empty_remainder_is_base(self):
        builder = PathBuilder("/src/shop", "shop")
        assert builder.resolve(Namespace("shop")) == "/src/shop"

    def test_root_prefix(self):
        builder = PathBuilder("/site-packages", "")
        assert builder.resolve("shop.models") == os.path.join(
            "/site-packages", "shop", "models"
        )

    def test_rejects_unrelated_prefix(self):
        builder = PathBuilder("/src/billing", "billing")
        with pytest.raises(InvalidRemainderError) as exc:
            builder.resolve("shop.models")
        assert exc.value.target == "shop.models"
        assert exc.value.prefix == "billing"

    def test_rejects_partial_segment_prefix(self):
        with pytest.raises(InvalidRemainderError):
            PathBuilder("/src", "Foo.Ba").resolve("Foo.Bar")


class TestWalkSourceFiles:
    def test_yields_relative_paths_recursively(self, tmp_path):
        _touch(tmp_path / "User.py")
        _touch(tmp_path / "models" / "Order.py")
        _touch(tmp_path / "models" / "deep" / "Line.py")

        found = set(walk_source_files(str(tmp_path)))

        assert found == {
            "User.py",
            os.path.join("models", "Order.py"),
            os.path.join("models", "deep", "Line.py"),
        }

    def test_suffix_match_is_case_insensitive(self, tmp_path):
        _touch(tmp_path / "Upper.PY")
        _touch(tmp_path / "lower.py")
        _touch(tmp_path / "readme.txt")
        _touch(tmp_path / "cached.pyc")

        assert set(walk_source_files(str(tmp_path), ".py")) == {"Upper.PY", "lower.py"}

    def test_custom_suffix(self, tmp_path):
        _touch(tmp_path / "User.php")
        _touch(tmp_path / "User.py")

        assert list(walk_source_files(str(tmp_path), ".php")) == ["User.php"]

    def test_directories_named_like_sources_are_skipped(self, tmp_path):
        (tmp_path / "weird.py").mkdir()
        _touch(tmp_path / "weird.py" / "Inner.py")

        assert list(walk_source_files(str(tmp_path))) == [os.path.join("weird.py", "Inner.py")]

    def test_excluded_directories(self, tmp_path):
        _touch(tmp_path / "Keep.py")
        _touch(tmp_path / "vendor" / "Skip.py")

        assert list(walk_source_files(str(tmp_path), exclude_dirs=["vendor"])) == ["Keep.py"]

    def test_is_lazy_and_can_stop_early(self, tmp_path):
        for i in range(5):
            _touch(tmp_path / f"Mod{i}.py")

        walker = walk_source_files(str(tmp_path))
        assert isinstance(walker, Iterator)
        first = next(walker)
        walker.close()
        assert first.endswith(".py")


class TestConstructNameFor:
    def test_top_level_file(self):
        assert construct_name_for("User.py", "shop") == "shop.User"

    def test_nested_file(self):
        path = os.path.join("models", "deep", "Line.py")
        assert construct_name_for(path, Namespace("shop")) == "shop.models.deep.Line"

    def test_backslash_separators(self):
        assert construct_name_for("models\\Order.py", "shop") == "shop.models.Order"

    def test_root_namespace(self):
        assert construct_name_for("User.py", "") == "User"

    def test_custom_suffix(self):
        assert construct_name_for("User.ext", "App", ".ext") == "App.User"

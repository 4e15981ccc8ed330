"""Tests for the Namespace value."""

from __future__ import annotations

import pytest

from fqnfinder.namespace import Namespace


class TestNamespaceParsing:
    @pytest.mark.parametrize("raw", [
        "", "shop", "shop.models", ".shop.models.", "shop//models",
        "Foo\\Bar\\", "\\Foo\\Bar", "  shop.models  ", "a.b/c\\d",
    ])
    def test_round_trips_through_string(self, raw):
        ns = Namespace(raw)
        assert Namespace(str(ns)) == ns
        assert str(Namespace(str(ns))) == str(ns)

    def test_accepts_all_delimiters(self):
        assert str(Namespace("Foo\\Bar/Baz.Qux")) == "Foo.Bar.Baz.Qux"
        assert Namespace("Foo\\Bar") == Namespace("Foo.Bar")

    def test_trailing_delimiters_do_not_add_segments(self):
        assert Namespace("shop.models.").segments == ("shop", "models")
        assert Namespace("\\shop\\").segments == ("shop",)

    def test_empty_is_root(self):
        ns = Namespace("")
        assert ns.is_root()
        assert ns.length() == 0
        assert str(ns) == ""

    def test_copy_from_namespace(self):
        original = Namespace("shop.models")
        assert Namespace(original) == original

    def test_from_segments(self):
        assert str(Namespace.from_segments(["shop", "", "models"])) == "shop.models"

    def test_hashable(self):
        assert len({Namespace("a.b"), Namespace("a/b"), Namespace("a.c")}) == 2

    def test_not_equal_to_string(self):
        assert Namespace("a") != "a"

    def test_repr(self):
        assert repr(Namespace("a\\b")) == "Namespace('a.b')"


class TestNamespacePrefixes:
    def test_starts_with_is_segment_aligned(self):
        assert not Namespace("Foo\\Bar").starts_with(Namespace("Foo\\Ba"))
        assert Namespace("Foo\\Bar").starts_with(Namespace("Foo"))

    def test_starts_with_itself(self):
        assert Namespace("shop.models").starts_with("shop.models")

    def test_longer_prefix_does_not_match(self):
        assert not Namespace("shop").starts_with("shop.models")

    def test_everything_starts_with_root(self):
        assert Namespace("shop.models").starts_with("")
        assert Namespace("").starts_with("")

    def test_length_counts_segments(self):
        assert Namespace("App\\Models\\User").length() == 3

    def test_remainder(self):
        assert Namespace("shop.models.orders").remainder("shop") == ("models", "orders")
        assert Namespace("shop").remainder("shop") == ()

    def test_remainder_requires_prefix(self):
        with pytest.raises(ValueError):
            Namespace("shop.models").remainder("billing")

    def test_child(self):
        assert str(Namespace("shop").child("models/Order")) == "shop.models.Order"
        assert str(Namespace("").child("Order")) == "Order"

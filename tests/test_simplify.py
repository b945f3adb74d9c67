from __future__ import annotations

import pytest

from astrology_node.simplify import apply_simplify, simplify_response


def test_keeps_first_keys_in_order() -> None:
    response = {f"k{i}": i for i in range(12)}
    trimmed = simplify_response(response, 10)
    assert list(trimmed) == [f"k{i}" for i in range(10)]


def test_small_objects_and_non_objects_are_untouched() -> None:
    small = {"a": {"nested": list(range(50))}}
    assert simplify_response(small) is small
    listing = [{"a": 1}] * 20
    assert simplify_response(listing, 1) is listing
    assert simplify_response("text", 0) == "text"


def test_nested_values_are_not_trimmed() -> None:
    nested = {f"k{i}": {"inner": i} for i in range(3)}
    assert simplify_response(nested, 1) == {"k0": {"inner": 0}}


def test_zero_keys_and_negative_limit() -> None:
    assert simplify_response({"a": 1}, 0) == {}
    with pytest.raises(ValueError):
        simplify_response({"a": 1}, -1)


def test_apply_simplify_honours_record_flag(make_ctx) -> None:
    response = {"a": 1, "b": 2, "c": 3}
    assert apply_simplify(make_ctx(simplify_max_keys=2), response) == {"a": 1, "b": 2}
    assert apply_simplify(make_ctx({"simplify": False}, simplify_max_keys=2), response) == response

from __future__ import annotations

import pytest

from src.domain.value_objects.tag_number import (
    format_tag_number,
    normalize_legacy_tag,
    numeric_part,
)


@pytest.mark.parametrize(
    ("number", "gender", "expected"),
    [("7", "female", "F0007"), (42, "male", "M0042"), ("1234", "female", "F1234")],
)
def test_format_tag_number(number, gender, expected):
    assert format_tag_number(number, gender) == expected


def test_numeric_part_strips_prefix():
    assert numeric_part("F0042") == "0042"
    assert numeric_part("ewe-17b") == "17"
    assert numeric_part("no digits") == "0"


def test_normalize_legacy_tag():
    assert normalize_legacy_tag("M0007", "male") is None
    assert normalize_legacy_tag("17", "female") == "F0017"
    assert normalize_legacy_tag("tag-5", "male") == "M0005"
    assert normalize_legacy_tag("x", "female") == "F0000"

from __future__ import annotations

import re

from src.domain.value_objects.gender import Gender

TAG_DIGITS = 4
RAW_TAG_PATTERN = re.compile(r"^\d{1,4}$")
FORMATTED_TAG_PATTERN = re.compile(r"^[FM]\d{4}$")


def format_tag_number(number: str | int, gender: str | Gender) -> str:
    """Return the stored tag, e.g. ``42`` + female -> ``F0042``."""
    prefix = Gender(gender).tag_prefix
    return f"{prefix}{str(number).zfill(TAG_DIGITS)}"


def numeric_part(tag_number: str) -> str:
    """Digits of a tag with its gender prefix stripped (``F0042`` -> ``0042``)."""
    if FORMATTED_TAG_PATTERN.match(tag_number):
        return tag_number[1:]
    match = re.search(r"\d+", tag_number)
    return match.group(0) if match else "0"


def normalize_legacy_tag(tag_number: str, gender: str | Gender) -> str | None:
    """New tag for a legacy free-form tag, or None when already formatted."""
    if FORMATTED_TAG_PATTERN.match(tag_number):
        return None
    return format_tag_number(numeric_part(tag_number), gender)

from __future__ import annotations

from uuid import uuid4

import pytest
from sheep_factory import TODAY, make_sheep

from src.application.errors import NotFound
from src.application.use_cases.matching.get_valid_matches import rank_matches


def _tags(matches):
    return [m.sheep.tag_number for m in matches]


def test_candidates_are_opposite_gender_adult_and_not_pregnant():
    ewe = make_sheep("F0001", "female")
    herd = [
        ewe,
        make_sheep("F0002", "female"),
        make_sheep("M0003", "male"),
        make_sheep("M0004", "male", age_months=12),
    ]

    matches = rank_matches(ewe.id, herd, today=TODAY)

    assert _tags(matches) == ["M0003"]
    assert matches[0].sheep is herd[2]


def test_pregnant_ewes_are_not_offered_to_a_ram():
    ram = make_sheep("M0001", "male")
    herd = [
        ram,
        make_sheep("F0002", "female", is_pregnant=True),
        make_sheep("F0003", "female"),
    ]

    assert _tags(rank_matches(ram.id, herd, today=TODAY)) == ["F0003"]


def test_compatible_first_then_by_descending_score():
    mother = make_sheep("F0100", "female", age_months=60)
    ewe = make_sheep("F0001", "female", fertility="BB", mother_id=mother.id)
    herd = [
        mother,
        ewe,
        make_sheep("M0002", "male", fertility="AA"),  # no adjustment, 100
        make_sheep("M0003", "male", fertility="BB", mother_id=mother.id),  # sibling
        make_sheep("M0004", "male", fertility="BB"),  # 130
        make_sheep("M0005", "male", fertility="B+", health_status="needs attention"),  # 110
    ]

    matches = rank_matches(ewe.id, herd, today=TODAY)

    assert _tags(matches) == ["M0004", "M0005", "M0002", "M0003"]
    assert [m.score for m in matches] == [130, 110, 100, 0]
    compat = [m.is_compatible for m in matches]
    assert compat == sorted(compat, reverse=True)


def test_equal_scores_keep_herd_order():
    ewe = make_sheep("F0001", "female", fertility="BB")
    herd = [
        make_sheep("M0009", "male", fertility="BB"),
        ewe,
        make_sheep("M0002", "male", fertility="BB"),
        make_sheep("M0005", "male", fertility="BB"),
    ]

    assert _tags(rank_matches(ewe.id, herd, today=TODAY)) == ["M0009", "M0002", "M0005"]


def test_target_without_candidates_returns_empty_list():
    ewe = make_sheep("F0001", "female")

    assert rank_matches(ewe.id, [ewe], today=TODAY) == []


def test_missing_target_raises_not_found():
    herd = [make_sheep("F0001", "female")]

    with pytest.raises(NotFound):
        rank_matches(uuid4(), herd, today=TODAY)


def test_young_target_still_ranked_but_blocked():
    lamb = make_sheep("F0001", "female", age_months=6)
    herd = [lamb, make_sheep("M0002", "male")]

    matches = rank_matches(lamb.id, herd, today=TODAY)

    assert len(matches) == 1
    assert matches[0].is_compatible is False
    assert "F0001 is too young for breeding" in matches[0].reasons

from __future__ import annotations

from sheep_factory import TODAY, make_sheep

from src.domain.services.herd_stats import BreedingStats, compute_stats


def test_empty_herd_is_all_zero():
    stats = compute_stats([], today=TODAY)

    assert stats == BreedingStats()
    assert stats.total_pairs == 0
    assert stats.growth_potential == 0


def test_single_breeding_pair():
    herd = [
        make_sheep("M0001", "male", fertility="AA"),
        make_sheep("F0002", "female", fertility="AA"),
    ]

    stats = compute_stats(herd, today=TODAY)

    assert stats.total_pairs == 1
    assert stats.growth_potential == 1.2
    assert stats.breeding_age_males == 1
    assert stats.breeding_age_females == 1


def test_breeding_age_counts_require_health_and_no_pregnancy():
    herd = [
        make_sheep("M0001", "male"),
        make_sheep("M0002", "male", health_status="needs attention"),
        make_sheep("M0003", "male", age_months=12),
        make_sheep("F0004", "female", fertility="B+"),
        make_sheep("F0005", "female", is_pregnant=True),
        make_sheep("F0006", "female", health_status="needs attention"),
        make_sheep("F0007", "female", age_months=3),
        make_sheep("F0008", "female", fertility=None),
    ]

    stats = compute_stats(herd, today=TODAY)

    assert stats.total_males == 3
    assert stats.total_females == 5
    assert stats.breeding_age_males == 1
    assert stats.breeding_age_females == 2
    assert stats.total_pairs == 2
    # B+ (2.0) + unset fertility treated as AA (1.2)
    assert stats.growth_potential == 3.2


def test_offspring_counts_cover_either_parent_field():
    ewe = make_sheep("F0001", "female")
    barren_ewe = make_sheep("F0002", "female")
    ram = make_sheep("M0003", "male")
    young_ram = make_sheep("M0004", "male", age_months=3)
    herd = [
        ewe,
        barren_ewe,
        ram,
        young_ram,
        make_sheep("F0005", "female", age_months=6, mother_id=ewe.id, father_id=ram.id),
        make_sheep("M0006", "male", age_months=6, mother_id=ewe.id),
    ]

    stats = compute_stats(herd, today=TODAY)

    assert stats.females_with_offspring == 1
    assert stats.males_with_offspring == 1


def test_growth_potential_rounds_to_one_decimal():
    herd = [make_sheep(f"F000{i}", "female", fertility="AA") for i in range(1, 4)]
    herd.append(make_sheep("F0009", "female", fertility="BB"))

    stats = compute_stats(herd, today=TODAY)

    # 1.2 * 3 + 2.5, exact in decimal arithmetic
    assert stats.growth_potential == 6.1
    assert stats.total_pairs == 0

from __future__ import annotations

from src.domain.value_objects.fertility import Fertility
from src.domain.value_objects.gender import Gender

# Month is approximated as 30 days everywhere ages are computed
DAYS_PER_MONTH = 30

MIN_BREEDING_AGE_MONTHS: dict[str, float] = {
    Gender.FEMALE.value: 16.8,
    Gender.MALE.value: 19.2,
}

LAMB_AGE_LIMIT_MONTHS = 12

DEFAULT_FERTILITY = Fertility.AA.value
DEFAULT_LITTER_SIZE = 1.2

# Expected lambs per pregnancy, keyed by the ewe's fertility rating
LITTER_SIZES: dict[str, float] = {
    Fertility.AA.value: 1.2,
    Fertility.B_PLUS.value: 2.0,
    Fertility.BB.value: 2.5,
}

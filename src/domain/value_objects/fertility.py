from __future__ import annotations

from enum import Enum


class Fertility(str, Enum):
    AA = "AA"
    B_PLUS = "B+"
    BB = "BB"

"""Reference Basic Pay Scale (BPS) data.

Two schedules are shipped:

- ``PAY_SCALE_2017``: the 2017 scale in force on 30.06.2022. The 30%
  Disparity Reduction Allowance is computed on this scale.
- ``PAY_SCALE_2022``: the current running scale. Stage detection and the
  10% ad-hoc increase use this scale.

Each grade is defined as (minimum, annual increment, number of increments);
the stage sequence runs from the minimum to the maximum of the grade.
"""

from __future__ import annotations

from functools import lru_cache

from pay_enhancement.pay_scales.table import PayScaleTable

GRADE_OPTIONS: tuple[int, ...] = tuple(range(1, 23))


def _stages(minimum: int, increment: int, increments: int) -> tuple[int, ...]:
    return tuple(minimum + increment * i for i in range(increments + 1))


# grade: (minimum, increment, increments)
_BPS_2017: dict[int, tuple[int, int, int]] = {
    1: (9130, 290, 30),
    2: (9310, 330, 30),
    3: (9610, 390, 30),
    4: (9900, 440, 30),
    5: (10260, 500, 30),
    6: (10620, 560, 30),
    7: (10990, 610, 30),
    8: (11380, 670, 30),
    9: (11770, 730, 30),
    10: (12160, 800, 30),
    11: (12570, 880, 30),
    12: (13320, 970, 30),
    13: (14150, 1070, 30),
    14: (15260, 1180, 30),
    15: (16120, 1300, 30),
    16: (20500, 1530, 30),
    17: (30370, 2410, 20),
    18: (38350, 3020, 20),
    19: (62780, 3240, 20),
    20: (71210, 4040, 14),
    21: (78590, 4590, 14),
    22: (83520, 5180, 14),
}

_BPS_2022: dict[int, tuple[int, int, int]] = {
    1: (13550, 430, 30),
    2: (13820, 490, 30),
    3: (14260, 580, 30),
    4: (14690, 660, 30),
    5: (15230, 750, 30),
    6: (15760, 840, 30),
    7: (16310, 910, 30),
    8: (16890, 1000, 30),
    9: (17470, 1090, 30),
    10: (18050, 1190, 30),
    11: (18650, 1300, 30),
    12: (19770, 1440, 30),
    13: (21000, 1600, 30),
    14: (22650, 1760, 30),
    15: (23920, 1930, 30),
    16: (27270, 2270, 30),
    17: (45070, 3420, 20),
    18: (57470, 4240, 20),
    19: (85160, 4400, 20),
    20: (95070, 6350, 14),
    21: (101050, 7170, 14),
    22: (109940, 7860, 14),
}

PAY_SCALE_2017: dict[int, tuple[int, ...]] = {
    grade: _stages(*row) for grade, row in _BPS_2017.items()
}
PAY_SCALE_2022: dict[int, tuple[int, ...]] = {
    grade: _stages(*row) for grade, row in _BPS_2022.items()
}


def build_table(name: str, scales: dict[int, tuple[int, ...]]) -> PayScaleTable:
    """Build a table and reject reference data that breaks its invariants."""
    table = PayScaleTable(name, scales)
    errors = table.integrity_errors()
    if errors:
        raise ValueError("Invalid pay scale reference data: " + "; ".join(errors))
    return table


@lru_cache(maxsize=1)
def historical_table() -> PayScaleTable:
    """The 2017 scale (baseline for the allowance)."""
    return build_table("BPS-2017", PAY_SCALE_2017)


@lru_cache(maxsize=1)
def current_table() -> PayScaleTable:
    """The 2022 scale (stage detection and current pay)."""
    return build_table("BPS-2022", PAY_SCALE_2022)

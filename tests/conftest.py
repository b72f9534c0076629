"""Pytest fixtures for enhancement estimator tests."""

from __future__ import annotations

import pytest

from pay_enhancement.calculators import SalaryEngine
from pay_enhancement.pay_scales import PayScaleTable, current_table, historical_table


@pytest.fixture
def historical() -> PayScaleTable:
    """The shipped 2017 scale."""
    return historical_table()


@pytest.fixture
def current() -> PayScaleTable:
    """The shipped 2022 scale."""
    return current_table()


@pytest.fixture
def engine(historical, current) -> SalaryEngine:
    """Engine over the shipped reference scales."""
    return SalaryEngine(historical=historical, current=current)


@pytest.fixture
def small_historical() -> PayScaleTable:
    """Hand-sized historical scale.

    BPS-2 has fewer stages than on the current scale, BPS-3 only exists
    on the current scale.
    """
    return PayScaleTable(
        "historical-test",
        {
            1: (1000, 1100, 1200, 1300),
            2: (2000, 2200),
            4: (0, 0, 0),
        },
    )


@pytest.fixture
def small_current() -> PayScaleTable:
    """Hand-sized current scale paired with ``small_historical``."""
    return PayScaleTable(
        "current-test",
        {
            1: (1500, 1650, 1650, 1800),
            2: (3000, 3300, 3600, 3900),
            3: (4000, 4400),
            4: (500, 600, 700),
            5: (),
        },
    )


@pytest.fixture
def small_engine(small_historical, small_current) -> SalaryEngine:
    """Engine over the hand-sized scales."""
    return SalaryEngine(historical=small_historical, current=small_current)

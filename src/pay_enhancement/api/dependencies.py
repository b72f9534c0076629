"""FastAPI dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from pay_enhancement.calculators import SalaryEngine


@lru_cache(maxsize=1)
def get_engine() -> SalaryEngine:
    """Shared engine over the reference pay scales."""
    return SalaryEngine()


# Type aliases for cleaner dependency injection
Engine = Annotated[SalaryEngine, Depends(get_engine)]

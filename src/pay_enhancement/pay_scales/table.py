"""Immutable pay scale lookup tables."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType


class PayScaleTable:
    """Grade -> ordered stage pay values for one pay period.

    Stage ``0`` is the grade minimum; each subsequent stage is one annual
    increment further. Values are stored as tuples behind a read-only
    mapping, so a table never changes after construction.
    """

    def __init__(self, name: str, scales: Mapping[int, Iterable[int]]):
        self.name = name
        self._scales: Mapping[int, tuple[int, ...]] = MappingProxyType(
            {int(grade): tuple(int(v) for v in values) for grade, values in scales.items()}
        )

    def __repr__(self) -> str:
        return f"PayScaleTable(name={self.name!r}, grades={len(self._scales)})"

    def __contains__(self, grade: object) -> bool:
        return grade in self._scales

    def __len__(self) -> int:
        return len(self._scales)

    @property
    def grades(self) -> list[int]:
        return sorted(self._scales)

    def lookup(self, grade: int) -> tuple[int, ...] | None:
        """Return the stage sequence for a grade, or None if unknown."""
        return self._scales.get(grade)

    def stage_count(self, grade: int) -> int:
        stages = self._scales.get(grade)
        return len(stages) if stages is not None else 0

    def minimum(self, grade: int) -> int | None:
        stages = self._scales.get(grade)
        if not stages:
            return None
        return stages[0]

    def pay_at(self, grade: int, stage: int) -> int | None:
        """Return the tabulated pay at a stage, or None if out of range."""
        stages = self._scales.get(grade)
        if stages is None or stage < 0 or stage >= len(stages):
            return None
        return stages[stage]

    def integrity_errors(self) -> list[str]:
        """Return every reference-data violation found in this table.

        Checks:
        - no negative pay values
        - stage values never decrease with seniority
        """
        errors: list[str] = []
        for grade, stages in sorted(self._scales.items()):
            if grade <= 0:
                errors.append(f"{self.name}: grade {grade} is not a positive identifier")
            for stage, value in enumerate(stages):
                if value < 0:
                    errors.append(
                        f"{self.name}: BPS-{grade} stage {stage} has negative pay {value}"
                    )
                if stage > 0 and value < stages[stage - 1]:
                    errors.append(
                        f"{self.name}: BPS-{grade} stage {stage} ({value}) is below "
                        f"stage {stage - 1} ({stages[stage - 1]})"
                    )
        return errors

"""Ten-accumulator partial-sum vector folded bottom-up by the aggregator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, fields


@dataclass(frozen=True)
class PartialSums:
    """Operating/capital spend plus transfer/debt/other totals for both years.

    Addition is component-wise, so folding child vectors in any order gives
    the same result.
    """

    opex2024: float = 0.0
    capex2024: float = 0.0
    opex2025: float = 0.0
    capex2025: float = 0.0
    transfers2024: float = 0.0
    transfers2025: float = 0.0
    debt2024: float = 0.0
    debt2025: float = 0.0
    other2024: float = 0.0
    other2025: float = 0.0

    @classmethod
    def zero(cls) -> PartialSums:
        return cls()

    @classmethod
    def sum_all(cls, items: Iterable[PartialSums]) -> PartialSums:
        acc = cls.zero()
        for item in items:
            acc = acc + item
        return acc

    def __add__(self, other: PartialSums) -> PartialSums:
        if not isinstance(other, PartialSums):
            return NotImplemented
        return PartialSums(**{
            f.name: getattr(self, f.name) + getattr(other, f.name)
            for f in fields(self)
        })

    @property
    def total_2024(self) -> float:
        return (
            self.opex2024 + self.capex2024 + self.transfers2024
            + self.debt2024 + self.other2024
        )

    @property
    def total_2025(self) -> float:
        return (
            self.opex2025 + self.capex2025 + self.transfers2025
            + self.debt2025 + self.other2025
        )

    def to_dict(self) -> dict[str, float]:
        return {k: float(v) for k, v in asdict(self).items()}

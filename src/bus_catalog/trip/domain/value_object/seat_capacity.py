from dataclasses import dataclass
from typing import ClassVar

from bus_catalog.trip.domain.exception import InvalidSeatCapacity


@dataclass(frozen=True)
class SeatCapacity:
    """座席数（空席数 + 総座席数）

    座席番号は 3 桁で採番するため総座席数は 999 まで。
    """

    MAX_TOTAL: ClassVar[int] = 999

    available: int
    total: int

    def __post_init__(self) -> None:
        if self.available < 0 or self.total < 0:
            raise InvalidSeatCapacity("Seat counts cannot be negative")
        if self.total > self.MAX_TOTAL:
            raise InvalidSeatCapacity(
                f"Total seats cannot exceed {self.MAX_TOTAL}: {self.total}"
            )
        if self.available > self.total:
            raise InvalidSeatCapacity(
                f"Available seats ({self.available}) cannot exceed "
                f"total seats ({self.total})"
            )

    @property
    def occupied(self) -> int:
        return self.total - self.available

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BusTripId:
    """バス便ID

    永続化層が採番する正の整数。
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"BusTripId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"BusTripId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def from_string(cls, s: str) -> BusTripId:
        """パスパラメータなどの文字列から生成"""
        if not (s.isascii() and s.isdigit()):
            raise ValueError(f"Invalid trip id: {s}")
        return cls(value=int(s))

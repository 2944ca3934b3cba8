from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from bus_catalog.shared.domain.exception import BusinessRuleViolationException
from bus_catalog.trip.domain.exception import InvalidPriceFormat


@dataclass(frozen=True)
class Price:
    """運賃（通貨を持たない正確な十進数）

    - 整数部は最大 8 桁、小数部は最大 2 桁（DECIMAL(10, 2) 相当）
    - 負の値は不可
    """

    # 符号 + 整数部/小数部 + 指数部。空白・改行・アンダースコア・NaN・Infinity は不可
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?"
    )
    MAX_AMOUNT: ClassVar[Decimal] = Decimal("99999999.99")
    SCALE: ClassVar[Decimal] = Decimal("0.01")

    amount: Decimal

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise InvalidPriceFormat(f"Price must be a finite number: {self.amount}")
        if self.amount < 0:
            raise BusinessRuleViolationException("Price cannot be negative")
        if self.amount > self.MAX_AMOUNT:
            raise BusinessRuleViolationException(
                f"Price cannot exceed {self.MAX_AMOUNT}"
            )
        if self.amount != self.amount.quantize(self.SCALE):
            raise BusinessRuleViolationException(
                "Price cannot have more than 2 decimal places"
            )

    def __str__(self) -> str:
        return str(self.amount)

    @classmethod
    def from_text(cls, text: str) -> Price:
        """十進数の文字列から生成する"""
        if not cls.PATTERN.fullmatch(text):
            raise InvalidPriceFormat(f"Invalid price format: {text!r}")
        try:
            amount = Decimal(text)
        except InvalidOperation as e:
            raise InvalidPriceFormat(f"Invalid price format: {text!r}") from e
        return cls(amount=amount)

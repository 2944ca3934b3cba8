from bus_catalog.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
)


class InvalidPriceFormat(DomainException):
    """料金の文字列が十進数として解釈できない場合"""

    pass


class InvalidSeatCapacity(BusinessRuleViolationException):
    """座席数の制約（0 <= 空席数 <= 総座席数）に違反した場合"""

    pass


class SeatInitializationFailedException(DomainException):
    """座席の初期化に失敗した場合

    便自体は永続化済みのまま残る（ロールバックしない）。
    """

    def __init__(self, trip_id: object, message: str | None = None) -> None:
        self.trip_id = trip_id
        super().__init__(message or f"Seat initialization failed for trip {trip_id}")

from bus_catalog.shared.domain import Entity
from bus_catalog.trip.domain.enum import SearchableField, SeatState
from bus_catalog.trip.domain.value_object import BusTripId, Price, SeatCapacity


class BusTrip(Entity[BusTripId]):
    """バス便エンティティ

    出発・到着時刻は書式を解釈しない文字列としてそのまま保持する。
    """

    def __init__(
        self,
        name: str,
        route: str,
        departure_time: str,
        arrival_time: str,
        capacity: SeatCapacity,
        price: Price,
        seat_state: SeatState = SeatState.PENDING,
        id: BusTripId | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._route = route
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._capacity = capacity
        self._price = price
        self._seat_state = seat_state

    @property
    def name(self) -> str:
        return self._name

    @property
    def route(self) -> str:
        return self._route

    @property
    def departure_time(self) -> str:
        return self._departure_time

    @property
    def arrival_time(self) -> str:
        return self._arrival_time

    @property
    def capacity(self) -> SeatCapacity:
        return self._capacity

    @property
    def available_seats(self) -> int:
        return self._capacity.available

    @property
    def total_seats(self) -> int:
        return self._capacity.total

    @property
    def price(self) -> Price:
        return self._price

    @property
    def seat_state(self) -> SeatState:
        return self._seat_state

    def mark_seats_initialized(self) -> None:
        """座席の初期化完了を記録する"""
        self._seat_state = SeatState.INITIALIZED

    def text_of(self, field: SearchableField) -> str:
        """検索対象フィールドの値を返す"""
        if field is SearchableField.NAME:
            return self._name
        return self._route

    def matches(self, field: SearchableField, keyword: str) -> bool:
        """フィールドが keyword を含むか（大文字小文字を区別しない）"""
        return keyword.lower() in self.text_of(field).lower()

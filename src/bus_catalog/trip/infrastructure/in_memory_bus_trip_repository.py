import itertools

from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.enum import SearchableField
from bus_catalog.trip.domain.repository import BusTripRepository
from bus_catalog.trip.domain.value_object import BusTripId


class InMemoryBusTripRepository(BusTripRepository):
    """メモリ上に保持する BusTripRepository の実装

    - 登録順を保持する
    - ID は 1 から連番で採番する
    - ローカル実行とテストで DynamoDB の代わりに使う
    """

    def __init__(self) -> None:
        self._trips: dict[BusTripId, BusTrip] = {}
        self._sequence = itertools.count(1)

    def save(self, trip: BusTrip) -> BusTrip:
        if trip.id is None:
            trip.assign_id(BusTripId(value=next(self._sequence)))
        self._trips[trip.id] = trip
        return trip

    def find_by_id(self, trip_id: BusTripId) -> BusTrip | None:
        return self._trips.get(trip_id)

    def find_all(self) -> list[BusTrip]:
        return list(self._trips.values())

    def find_by_field_containing(
        self, field: SearchableField, text: str
    ) -> list[BusTrip]:
        return [trip for trip in self._trips.values() if trip.matches(field, text)]

from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.repository import BusTripRepository
from bus_catalog.trip.domain.value_object import BusTripId


class GetTripService:
    """便詳細取得のユースケース"""

    def __init__(self, repository: BusTripRepository) -> None:
        self._repository = repository

    def get_by_id(self, trip_id: BusTripId) -> BusTrip | None:
        """便IDで取得する。存在しない場合は None"""
        return self._repository.find_by_id(trip_id)

from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.repository import BusTripRepository


class ListTripsService:
    """便一覧取得のユースケース"""

    def __init__(self, repository: BusTripRepository) -> None:
        self._repository = repository

    def list_all(self) -> list[BusTrip]:
        return self._repository.find_all()

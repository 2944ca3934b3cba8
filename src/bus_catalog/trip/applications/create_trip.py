from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.factory import BusTripFactory, TripDetails
from bus_catalog.trip.domain.repository import BusTripRepository


class CreateTripService:
    """便登録のユースケース"""

    def __init__(
        self, repository: BusTripRepository, factory: BusTripFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def create(self, trip_details: TripDetails) -> BusTrip:
        """便を登録する

        座席の初期化は含まない（InitializeSeatsService を別途呼び出す）。
        """
        trip: BusTrip = self._factory.create(trip_details)
        return self._repository.save(trip)

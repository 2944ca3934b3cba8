from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.exception import SeatInitializationFailedException
from bus_catalog.trip.domain.repository import BusTripRepository
from bus_catalog.trip.domain.service import SeatInitializer


class InitializeSeatsService:
    """登録済みの便の座席を初期化するユースケース

    便の登録とは別トランザクション。失敗しても便は PENDING のまま残る。
    """

    def __init__(
        self, repository: BusTripRepository, seat_initializer: SeatInitializer
    ) -> None:
        self._repository = repository
        self._seat_initializer = seat_initializer

    def initialize(self, trip: BusTrip) -> BusTrip:
        """座席を初期化し、便の座席状態を更新する"""
        try:
            self._seat_initializer.initialize(trip)
        except Exception as e:
            raise SeatInitializationFailedException(trip.id) from e

        trip.mark_seats_initialized()
        return self._repository.save(trip)

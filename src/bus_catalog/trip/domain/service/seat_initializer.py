from abc import ABC, abstractmethod

from bus_catalog.trip.domain.entity.bus_trip import BusTrip


class SeatInitializer(ABC):
    """座席管理への初期化依頼のインターフェース"""

    @abstractmethod
    def initialize(self, trip: BusTrip) -> None:
        """永続化済みの便に対して座席の状態を用意する"""
        raise NotImplementedError

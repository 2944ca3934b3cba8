from typing import TypedDict

from bus_catalog.trip.domain.entity.bus_trip import BusTrip
from bus_catalog.trip.domain.enum import SeatState
from bus_catalog.trip.domain.value_object import Price, SeatCapacity


class TripDetails(TypedDict):
    """便の入力データ構造（TypedDict）"""

    name: str
    route: str
    departure_time: str
    arrival_time: str
    available_seats: int
    total_seats: int
    price: str


class BusTripFactory:
    """バス便ファクトリ"""

    def create(self, trip_details: TripDetails) -> BusTrip:
        """ID 未採番の新規便エンティティを生成する"""
        price = Price.from_text(trip_details["price"])
        capacity = SeatCapacity(
            available=trip_details["available_seats"],
            total=trip_details["total_seats"],
        )

        return BusTrip(
            name=trip_details["name"],
            route=trip_details["route"],
            departure_time=trip_details["departure_time"],
            arrival_time=trip_details["arrival_time"],
            capacity=capacity,
            price=price,
            seat_state=SeatState.PENDING,
        )

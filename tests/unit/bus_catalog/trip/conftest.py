from decimal import Decimal

import pytest

from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.enum import SeatState
from bus_catalog.trip.domain.factory import TripDetails
from bus_catalog.trip.domain.value_object import BusTripId, Price, SeatCapacity


@pytest.fixture
def create_bus_trip():
    """BusTrip を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        trip_id: int | None = None,
        name: str = "Express 21",
        route: str = "Springfield-Capital City",
        departure_time: str = "08:00",
        arrival_time: str = "12:30",
        available_seats: int = 40,
        total_seats: int = 40,
        price: Decimal = Decimal("25.50"),
        seat_state: SeatState = SeatState.PENDING,
    ) -> BusTrip:
        return BusTrip(
            id=BusTripId(value=trip_id) if trip_id is not None else None,
            name=name,
            route=route,
            departure_time=departure_time,
            arrival_time=arrival_time,
            capacity=SeatCapacity(available=available_seats, total=total_seats),
            price=Price(amount=price),
            seat_state=seat_state,
        )

    return _factory


@pytest.fixture
def trip_details() -> TripDetails:
    return {
        "name": "Express 21",
        "route": "Springfield-Capital City",
        "departure_time": "08:00",
        "arrival_time": "12:30",
        "available_seats": 40,
        "total_seats": 40,
        "price": "25.50",
    }

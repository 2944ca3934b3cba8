from __future__ import annotations

from pydantic import BaseModel

from bus_catalog.trip.domain.entity.bus_trip import BusTrip


class TripData(BaseModel):
    """便データのレスポンスモデル"""

    trip_id: int
    name: str
    route: str
    departure_time: str
    arrival_time: str
    available_seats: int
    total_seats: int
    price: str
    seat_state: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: TripData


class ListResponse(BaseModel):
    """一覧レスポンスモデル"""

    status: str = "success"
    data: list[TripData]
    count: int


def to_trip_data(trip: BusTrip) -> TripData:
    """BusTrip エンティティをレスポンスデータに変換する"""
    return TripData(
        trip_id=trip.id.value,
        name=trip.name,
        route=trip.route,
        departure_time=trip.departure_time,
        arrival_time=trip.arrival_time,
        available_seats=trip.available_seats,
        total_seats=trip.total_seats,
        price=str(trip.price.amount),
        seat_state=trip.seat_state.value,
    )


def to_response(trip: BusTrip) -> dict:
    """BusTrip エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_trip_data(trip)).model_dump()


def to_list_response(trips: list[BusTrip]) -> dict:
    """BusTrip のリストを一覧レスポンス辞書に変換する"""
    return ListResponse(
        data=[to_trip_data(trip) for trip in trips],
        count=len(trips),
    ).model_dump()

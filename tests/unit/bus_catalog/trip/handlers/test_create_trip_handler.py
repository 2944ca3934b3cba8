import json
from unittest.mock import MagicMock

import pytest

from bus_catalog.trip.applications.create_trip import CreateTripService
from bus_catalog.trip.applications.initialize_seats import InitializeSeatsService
from bus_catalog.trip.domain.enum import SeatState
from bus_catalog.trip.domain.factory import BusTripFactory
from bus_catalog.trip.domain.value_object import BusTripId
from bus_catalog.trip.handlers import create_trip


@pytest.fixture
def seat_initializer():
    return MagicMock()


@pytest.fixture(autouse=True)
def services(monkeypatch, in_memory_repository, seat_initializer):
    monkeypatch.setattr(
        create_trip,
        "service",
        CreateTripService(repository=in_memory_repository, factory=BusTripFactory()),
    )
    monkeypatch.setattr(
        create_trip,
        "seat_service",
        InitializeSeatsService(
            repository=in_memory_repository, seat_initializer=seat_initializer
        ),
    )


class TestCreateTripHandler:
    def test_creates_trip_and_initializes_seats(
        self,
        api_event,
        create_trip_body,
        lambda_context,
        in_memory_repository,
        seat_initializer,
    ):
        event = api_event(method="POST", body=create_trip_body)

        response = create_trip.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["status"] == "success"
        assert body["data"] == {
            "trip_id": 1,
            "name": "Express 21",
            "route": "Springfield-Capital City",
            "departure_time": "08:00",
            "arrival_time": "12:30",
            "available_seats": 40,
            "total_seats": 40,
            "price": "25.50",
            "seat_state": "INITIALIZED",
        }
        seat_initializer.initialize.assert_called_once()
        stored = in_memory_repository.find_by_id(BusTripId(value=1))
        assert stored.seat_state == SeatState.INITIALIZED

    def test_numeric_price_is_accepted(
        self, api_event, create_trip_body, lambda_context
    ):
        create_trip_body["price"] = 25.5
        response = create_trip.lambda_handler(
            api_event(method="POST", body=create_trip_body), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"]["price"] == "25.5"

    def test_invalid_price_returns_400(
        self, api_event, create_trip_body, lambda_context, in_memory_repository
    ):
        create_trip_body["price"] = "twenty"

        response = create_trip.lambda_handler(
            api_event(method="POST", body=create_trip_body), lambda_context
        )

        assert response["statusCode"] == 400
        assert "Invalid price format" in json.loads(response["body"])["message"]
        assert in_memory_repository.find_all() == []

    def test_available_exceeding_total_returns_400(
        self, api_event, create_trip_body, lambda_context, in_memory_repository
    ):
        create_trip_body["available_seats"] = 50

        response = create_trip.lambda_handler(
            api_event(method="POST", body=create_trip_body), lambda_context
        )

        assert response["statusCode"] == 400
        assert in_memory_repository.find_all() == []

    @pytest.mark.parametrize("body", [None, "not json", json.dumps({"name": "x"})])
    def test_invalid_body_returns_400(self, api_event, lambda_context, body):
        response = create_trip.lambda_handler(
            api_event(method="POST", body=body), lambda_context
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Invalid request"

    def test_too_long_name_returns_400(
        self, api_event, create_trip_body, lambda_context
    ):
        create_trip_body["name"] = "A" * 101

        response = create_trip.lambda_handler(
            api_event(method="POST", body=create_trip_body), lambda_context
        )

        assert response["statusCode"] == 400

    def test_too_many_seats_returns_400(
        self,
        api_event,
        create_trip_body,
        lambda_context,
        in_memory_repository,
        seat_initializer,
    ):
        create_trip_body["total_seats"] = 1000

        response = create_trip.lambda_handler(
            api_event(method="POST", body=create_trip_body), lambda_context
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Invalid request"
        assert in_memory_repository.find_all() == []
        seat_initializer.initialize.assert_not_called()

    def test_price_with_too_many_decimals_returns_400(
        self, api_event, create_trip_body, lambda_context, in_memory_repository
    ):
        create_trip_body["price"] = "25.505"

        response = create_trip.lambda_handler(
            api_event(method="POST", body=create_trip_body), lambda_context
        )

        assert response["statusCode"] == 400
        assert in_memory_repository.find_all() == []

    def test_seat_initialization_failure_keeps_trip(
        self,
        api_event,
        create_trip_body,
        lambda_context,
        in_memory_repository,
        seat_initializer,
    ):
        seat_initializer.initialize.side_effect = RuntimeError("seat store down")

        response = create_trip.lambda_handler(
            api_event(method="POST", body=create_trip_body), lambda_context
        )

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["trip_id"] == 1
        stored = in_memory_repository.find_by_id(BusTripId(value=1))
        assert stored is not None
        assert stored.seat_state == SeatState.PENDING

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_catalog.shared.domain.exception import BusinessRuleViolationException
from bus_catalog.shared.utils import api_response
from bus_catalog.trip.applications.create_trip import CreateTripService
from bus_catalog.trip.applications.initialize_seats import InitializeSeatsService
from bus_catalog.trip.domain.exception import (
    InvalidPriceFormat,
    SeatInitializationFailedException,
)
from bus_catalog.trip.domain.factory import BusTripFactory, TripDetails
from bus_catalog.trip.handlers.request_models import CreateTripRequest
from bus_catalog.trip.handlers.response_models import to_response
from bus_catalog.trip.infrastructure.dynamodb_bus_trip_repository import (
    DynamoDBBusTripRepository,
)
from bus_catalog.trip.infrastructure.dynamodb_seat_initializer import (
    DynamoDBSeatInitializer,
)

logger = Logger()

repository = DynamoDBBusTripRepository()
factory = BusTripFactory()
service = CreateTripService(repository=repository, factory=factory)
seat_service = InitializeSeatsService(
    repository=repository, seat_initializer=DynamoDBSeatInitializer()
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """便登録 Lambda Handler

    便の登録後に座席を初期化する。座席の初期化に失敗しても
    登録済みの便は残り、座席状態は PENDING のままとなる。
    """

    logger.info("Received create trip request")

    try:
        request = CreateTripRequest.model_validate_json(event.body or "")
    except ValidationError as e:
        return api_response(
            400,
            {"message": "Invalid request", "errors": e.errors(include_url=False)},
        )

    try:
        trip = service.create(_to_trip_details(request))
    except (InvalidPriceFormat, BusinessRuleViolationException) as e:
        return api_response(400, {"message": str(e)})
    except Exception:
        logger.exception("Failed to create trip")
        return api_response(500, {"message": "Internal server error"})

    logger.info("Trip created", extra={"trip_id": str(trip.id)})

    try:
        trip = seat_service.initialize(trip)
    except SeatInitializationFailedException as e:
        logger.exception("Failed to initialize seats", extra={"trip_id": str(e.trip_id)})
        return api_response(
            500,
            {"message": "Seat initialization failed", "trip_id": trip.id.value},
        )
    except Exception:
        logger.exception("Failed to update trip after seat initialization")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_response(trip))


def _to_trip_details(request: CreateTripRequest) -> TripDetails:
    """リクエストボディから TripDetails を構築する"""

    return {
        "name": request.name,
        "route": request.route,
        "departure_time": request.departure_time,
        "arrival_time": request.arrival_time,
        "available_seats": request.available_seats,
        "total_seats": request.total_seats,
        "price": request.price,
    }

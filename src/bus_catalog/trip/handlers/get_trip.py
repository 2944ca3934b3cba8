from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_catalog.shared.utils import api_response
from bus_catalog.trip.applications.get_trip import GetTripService
from bus_catalog.trip.domain.value_object import BusTripId
from bus_catalog.trip.handlers.response_models import to_response
from bus_catalog.trip.infrastructure.dynamodb_bus_trip_repository import (
    DynamoDBBusTripRepository,
)

logger = Logger()

repository = DynamoDBBusTripRepository()
service = GetTripService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """便詳細取得 Lambda Handler"""

    path_params = event.path_parameters or {}
    raw_trip_id = path_params.get("trip_id")

    if not raw_trip_id:
        return api_response(400, {"message": "trip_id is required"})

    try:
        trip_id = BusTripId.from_string(raw_trip_id)
    except ValueError:
        if raw_trip_id.isascii() and raw_trip_id.isdigit():
            # 0 は採番されないため存在しない便として扱う
            return api_response(404, {"message": f"Trip not found: {raw_trip_id}"})
        return api_response(400, {"message": f"Invalid trip_id: {raw_trip_id}"})

    logger.info("Fetching trip details", extra={"trip_id": str(trip_id)})

    try:
        trip = service.get_by_id(trip_id)
    except Exception:
        logger.exception("Failed to fetch trip details")
        return api_response(500, {"message": "Internal server error"})

    if trip is None:
        return api_response(404, {"message": f"Trip not found: {trip_id}"})

    return api_response(200, to_response(trip))

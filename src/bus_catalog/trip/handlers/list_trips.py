from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_catalog.shared.utils import api_response
from bus_catalog.trip.applications.list_trips import ListTripsService
from bus_catalog.trip.handlers.response_models import to_list_response
from bus_catalog.trip.infrastructure.dynamodb_bus_trip_repository import (
    DynamoDBBusTripRepository,
)

logger = Logger()

repository = DynamoDBBusTripRepository()
service = ListTripsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """便一覧取得 Lambda Handler"""

    logger.info("Listing all trips")

    try:
        trips = service.list_all()
    except Exception:
        logger.exception("Failed to list trips")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_list_response(trips))

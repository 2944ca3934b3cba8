from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_catalog.shared.utils import api_response
from bus_catalog.trip.applications.search_trips import SearchTripsService
from bus_catalog.trip.handlers.response_models import to_list_response
from bus_catalog.trip.infrastructure.dynamodb_bus_trip_repository import (
    DynamoDBBusTripRepository,
)

logger = Logger()

repository = DynamoDBBusTripRepository()
service = SearchTripsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """便検索 Lambda Handler

    クエリパラメータ name / route はどちらも任意。
    """

    query_params = event.query_string_parameters or {}
    name = query_params.get("name")
    route = query_params.get("route")

    logger.info("Searching trips", extra={"name": name, "route": route})

    try:
        trips = service.search(name=name, route=route)
    except Exception:
        logger.exception("Failed to search trips")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_list_response(trips))

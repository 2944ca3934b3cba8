import json

import pytest


@pytest.fixture
def api_event():
    """API Gateway (REST API) のプロキシイベントを生成する Factory fixture"""

    def _factory(
        method: str = "GET",
        path: str = "/trips",
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
    ) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "pathParameters": path_parameters,
            "queryStringParameters": query_string_parameters,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": {"requestId": "test-request", "stage": "prod"},
        }

    return _factory


@pytest.fixture
def create_trip_body() -> dict:
    return {
        "name": "Express 21",
        "route": "Springfield-Capital City",
        "departure_time": "08:00",
        "arrival_time": "12:30",
        "available_seats": 40,
        "total_seats": 40,
        "price": "25.50",
    }

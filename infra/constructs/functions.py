import datetime

from aws_cdk import Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SERVICE_NAME = "bus-trip-catalog"

# Powertools for AWS Lambda (Python) v3 の公開 Layer
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:{version}"
)


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        powertools_layer_version: int = 18,
    ) -> None:
        super().__init__(scope, id)

        powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(
                region=Stack.of(self).region,
                version=powertools_layer_version,
            ),
        )

        self.create_trip = self._create_function(
            "CreateTripLambda",
            "bus_catalog.trip.handlers.create_trip.lambda_handler",
            table,
            powertools_layer,
        )

        self.get_trip = self._create_function(
            "GetTripLambda",
            "bus_catalog.trip.handlers.get_trip.lambda_handler",
            table,
            powertools_layer,
        )

        self.list_trips = self._create_function(
            "ListTripsLambda",
            "bus_catalog.trip.handlers.list_trips.lambda_handler",
            table,
            powertools_layer,
        )

        self.search_trips = self._create_function(
            "SearchTripsLambda",
            "bus_catalog.trip.handlers.search_trips.lambda_handler",
            table,
            powertools_layer,
        )

        self.health = self._create_function(
            "HealthLambda",
            "bus_catalog.trip.handlers.health.lambda_handler",
            table,
            powertools_layer,
        )

        # 登録は便・座席・カウンタへの書き込みが必要
        table.grant_read_write_data(self.create_trip)
        for fn in [self.get_trip, self.list_trips, self.search_trips]:
            table.grant_read_data(fn)

        self.all_functions = [
            self.create_trip,
            self.get_trip,
            self.list_trips,
            self.search_trips,
            self.health,
        ]

    def _create_function(
        self,
        id: str,
        handler: str,
        table: dynamodb.Table,
        powertools_layer: _lambda.ILayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[powertools_layer],
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )

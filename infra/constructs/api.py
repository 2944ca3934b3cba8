from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        create_trip: _lambda.Function,
        get_trip: _lambda.Function,
        list_trips: _lambda.Function,
        search_trips: _lambda.Function,
        health: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BusTripRestApi",
            rest_api_name="Bus Trip Catalog API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        trips_resource = self.rest_api.root.add_resource("trips")

        # POST /trips -> Lambda (create_trip)
        trips_resource.add_method("POST", apigw.LambdaIntegration(create_trip))

        # GET /trips -> Lambda (list_trips)
        trips_resource.add_method("GET", apigw.LambdaIntegration(list_trips))

        # GET /trips/search -> Lambda (search_trips)
        search_resource = trips_resource.add_resource("search")
        search_resource.add_method(
            "GET",
            apigw.LambdaIntegration(search_trips),
            request_parameters={
                "method.request.querystring.name": False,
                "method.request.querystring.route": False,
            },
        )

        # GET /trips/health -> Lambda (health)
        health_resource = trips_resource.add_resource("health")
        health_resource.add_method("GET", apigw.LambdaIntegration(health))

        # GET /trips/{trip_id} -> Lambda (get_trip)
        trip_resource = trips_resource.add_resource("{trip_id}")
        trip_resource.add_method("GET", apigw.LambdaIntegration(get_trip))

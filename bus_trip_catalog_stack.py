from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions


class BusTripCatalogStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
        )

        api = Api(
            self,
            "Api",
            create_trip=fns.create_trip,
            get_trip=fns.get_trip,
            list_trips=fns.list_trips,
            search_trips=fns.search_trips,
            health=fns.health,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)

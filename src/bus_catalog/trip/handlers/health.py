from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_catalog.shared.utils import api_response

logger = Logger()


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """ヘルスチェック Lambda Handler"""
    return api_response(200, {"message": "Bus trip catalog is alive!"})

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.catalog.applications.browse_catalog import BrowseCatalogService
from services.catalog.handlers.response_models import to_hotel_data
from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBCatalogRepository,
)
from services.shared.config import get_settings
from services.shared.utils import api_response
from services.shared.utils.error_handler import api_error_handler

logger = Logger()

settings = get_settings()
repository = DynamoDBCatalogRepository(
    settings.table_name, settings.external_call_timeout_seconds
)
service = BrowseCatalogService(repository=repository)


@logger.inject_lambda_context
@api_error_handler
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ホテル一覧取得 Lambda Handler"""
    logger.info("Listing hotels")

    hotels = service.list_hotels()
    return api_response(200, [to_hotel_data(hotel) for hotel in hotels])

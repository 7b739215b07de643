from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.catalog.applications.browse_catalog import BrowseCatalogService
from services.catalog.handlers.response_models import to_room_data
from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBCatalogRepository,
)
from services.shared.config import get_settings
from services.shared.domain import HotelId
from services.shared.utils import api_response
from services.shared.utils.error_handler import api_error_handler
from services.shared.utils.path_parameters import require_path_parameter

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
    """客室一覧取得 Lambda Handler"""
    hotel_id = HotelId(value=require_path_parameter(event, "id"))
    logger.info("Listing rooms", extra={"hotel_id": str(hotel_id)})

    rooms = service.list_rooms(hotel_id)
    return api_response(200, [to_room_data(room) for room in rooms])

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBCatalogRepository,
)
from services.review.applications.list_reviews import ListReviewsService
from services.review.handlers.response_models import to_my_review_data
from services.review.infrastructure.dynamodb_review_repository import (
    DynamoDBReviewRepository,
)
from services.shared.config import get_settings
from services.shared.utils import api_response
from services.shared.utils.auth import resolve_auth_context
from services.shared.utils.dynamodb import get_table
from services.shared.utils.error_handler import api_error_handler

logger = Logger()

settings = get_settings()
table = get_table(settings.table_name, settings.external_call_timeout_seconds)
service = ListReviewsService(
    repository=DynamoDBReviewRepository(table=table),
    catalog=DynamoDBCatalogRepository(table=table),
)


@logger.inject_lambda_context
@api_error_handler
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """本人のレビュー一覧取得 Lambda Handler"""
    auth = resolve_auth_context(event)
    entries = service.list_mine(auth)
    logger.info(
        "Listed reviews", extra={"user_id": str(auth.user_id), "count": len(entries)}
    )
    return api_response(200, [to_my_review_data(entry) for entry in entries])

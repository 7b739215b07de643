from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.my_bookings import MyBookingsService
from services.booking.handlers.response_models import to_booking_dict
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.config import get_settings
from services.shared.utils import api_response
from services.shared.utils.auth import resolve_auth_context
from services.shared.utils.error_handler import api_error_handler

logger = Logger()

settings = get_settings()
repository = DynamoDBBookingRepository(
    settings.table_name, settings.external_call_timeout_seconds
)
service = MyBookingsService(repository=repository)


@logger.inject_lambda_context
@api_error_handler
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """本人の予約一覧取得 Lambda Handler

    GET /api/bookings/my-bookings と GET /api/user/bookings の両方で使う。
    """
    auth = resolve_auth_context(event)
    bookings = service.list_bookings(auth)
    logger.info(
        "Listed bookings",
        extra={"user_id": str(auth.user_id), "count": len(bookings)},
    )
    return api_response(200, [to_booking_dict(booking) for booking in bookings])

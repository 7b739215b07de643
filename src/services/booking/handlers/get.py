from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.my_bookings import MyBookingsService
from services.booking.domain.value_object import BookingId
from services.booking.handlers.response_models import to_booking_dict
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.config import get_settings
from services.shared.utils import api_response
from services.shared.utils.auth import resolve_auth_context
from services.shared.utils.error_handler import api_error_handler
from services.shared.utils.path_parameters import require_path_parameter

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
    """予約詳細取得 Lambda Handler"""
    auth = resolve_auth_context(event)
    booking_id = BookingId(value=require_path_parameter(event, "id"))
    logger.info("Fetching booking", extra={"booking_id": str(booking_id)})

    booking = service.get_booking(auth, booking_id)
    return api_response(200, to_booking_dict(booking))

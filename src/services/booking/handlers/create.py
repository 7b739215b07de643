from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.create_booking import (
    BookingDetails,
    CreateBookingService,
)
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import (
    CreateBookingResponse,
    to_booking_data,
)
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBCatalogRepository,
)
from services.payment.infrastructure.stripe_payment_gateway import (
    StripePaymentGateway,
)
from services.shared.config import get_settings
from services.shared.domain import HotelId, RoomId
from services.shared.utils import api_response
from services.shared.utils.auth import resolve_auth_context
from services.shared.utils.dynamodb import get_table
from services.shared.utils.error_handler import api_error_handler

logger = Logger()

# 依存関係の組み立て（コールドスタート時に一度だけ）
settings = get_settings()
table = get_table(settings.table_name, settings.external_call_timeout_seconds)
service = CreateBookingService(
    catalog=DynamoDBCatalogRepository(table=table),
    gateway=StripePaymentGateway(
        settings.stripe_secret_key, settings.external_call_timeout_seconds
    ),
    repository=DynamoDBBookingRepository(table=table),
    currency=settings.currency,
)


@logger.inject_lambda_context
@api_error_handler
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler

    料金を計算して PaymentIntent を作成し、決済待ちの予約を保存する。
    """
    auth = resolve_auth_context(event)
    request = CreateBookingRequest.model_validate_json(event.body or "{}")

    logger.info(
        "Received create booking request",
        extra={
            "user_id": str(auth.user_id),
            "hotel_id": request.hotel_id,
            "room_id": request.room_id,
        },
    )

    details: BookingDetails = {
        "hotel_id": HotelId(value=request.hotel_id),
        "room_id": RoomId(value=request.room_id),
        "check_in_date": request.check_in_date,
        "check_out_date": request.check_out_date,
        "guest_count": request.guest_count,
        "special_requests": request.special_requests,
        "is_split_payment": request.is_split_payment,
        "split_emails": list(request.split_emails),
    }
    result = service.create(auth, details)

    response = CreateBookingResponse(
        booking=to_booking_data(result.booking),
        client_secret=result.client_secret,
    )
    return api_response(201, response.to_json_dict())

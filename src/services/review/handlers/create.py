from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.domain.value_object import BookingId
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.review.applications.submit_review import (
    ReviewDetails,
    SubmitReviewService,
)
from services.review.handlers.request_models import SubmitReviewRequest
from services.review.handlers.response_models import to_review_data
from services.review.infrastructure.dynamodb_review_repository import (
    DynamoDBReviewRepository,
)
from services.shared.config import get_settings
from services.shared.domain import HotelId
from services.shared.utils import api_response
from services.shared.utils.auth import resolve_auth_context
from services.shared.utils.dynamodb import get_table
from services.shared.utils.error_handler import api_error_handler

logger = Logger()

settings = get_settings()
table = get_table(settings.table_name, settings.external_call_timeout_seconds)
service = SubmitReviewService(
    bookings=DynamoDBBookingRepository(table=table),
    repository=DynamoDBReviewRepository(table=table),
)


@logger.inject_lambda_context
@api_error_handler
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """レビュー投稿 Lambda Handler"""
    auth = resolve_auth_context(event)
    request = SubmitReviewRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Received submit review request",
        extra={"booking_id": request.booking_id, "hotel_id": request.hotel_id},
    )

    details: ReviewDetails = {
        "booking_id": BookingId(value=request.booking_id),
        "hotel_id": HotelId(value=request.hotel_id),
        "rating": request.rating,
        "title": request.title,
        "comment": request.comment,
    }
    review = service.submit(auth, details)
    return api_response(201, to_review_data(review))

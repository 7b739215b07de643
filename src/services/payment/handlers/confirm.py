from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.response_models import to_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.payment.applications.confirm_payment import ConfirmPaymentService
from services.payment.handlers.request_models import ConfirmPaymentRequest
from services.payment.handlers.response_models import ConfirmPaymentResponse
from services.payment.infrastructure.stripe_payment_gateway import (
    StripePaymentGateway,
)
from services.shared.config import get_settings
from services.shared.utils import api_response
from services.shared.utils.auth import resolve_auth_context
from services.shared.utils.error_handler import api_error_handler

logger = Logger()

settings = get_settings()
gateway = StripePaymentGateway(
    settings.stripe_secret_key, settings.external_call_timeout_seconds
)
repository = DynamoDBBookingRepository(
    settings.table_name, settings.external_call_timeout_seconds
)
service = ConfirmPaymentService(gateway=gateway, repository=repository)


@logger.inject_lambda_context
@api_error_handler
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """決済完了確認 Lambda Handler"""
    auth = resolve_auth_context(event)
    request = ConfirmPaymentRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Received confirm payment request",
        extra={"payment_intent_id": request.payment_intent_id},
    )

    booking = service.confirm(auth, request.payment_intent_id)
    response = ConfirmPaymentResponse(booking=to_booking_data(booking))
    return api_response(200, response.to_json_dict())

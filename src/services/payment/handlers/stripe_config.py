from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.payment.handlers.response_models import StripeConfigResponse
from services.shared.config import get_settings
from services.shared.utils import api_response
from services.shared.utils.error_handler import api_error_handler

logger = Logger()

settings = get_settings()


@logger.inject_lambda_context
@api_error_handler
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """Stripe 公開可能キー取得 Lambda Handler（認証不要）"""
    response = StripeConfigResponse(
        publishable_key=settings.stripe_publishable_key
    )
    return api_response(
        200,
        response.to_json_dict(),
        headers={"Cache-Control": "public, max-age=300"},
    )

from typing import Callable

from aws_lambda_powertools import Logger
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.shared.domain.exception import (
    AuthenticationException,
    BusinessRuleViolationException,
    ResourceNotFoundException,
    ValidationException,
)
from services.shared.utils.http_response import api_response

logger = Logger(child=True)


@lambda_handler_decorator
def api_error_handler(
    handler: Callable[[dict, LambdaContext], dict],
    event: dict,
    context: LambdaContext,
) -> dict:
    """ドメイン例外を HTTP レスポンスに変換する

    決済代行・データストアの障害を含む想定外の例外は、詳細をログに残し
    クライアントには汎用メッセージの 500 を返す。
    """
    try:
        return handler(event, context)
    except ValidationError as e:
        return api_response(
            400,
            {"message": "Invalid input", "errors": e.errors(include_url=False)},
        )
    except ValidationException as e:
        body: dict = {"message": str(e)}
        if e.errors:
            body["errors"] = e.errors
        return api_response(400, body)
    except BusinessRuleViolationException as e:
        return api_response(400, {"message": str(e)})
    except AuthenticationException as e:
        return api_response(401, {"message": str(e)})
    except ResourceNotFoundException as e:
        return api_response(404, {"message": str(e)})
    except Exception:
        logger.exception("Unexpected error")
        return api_response(500, {"message": "Internal server error"})

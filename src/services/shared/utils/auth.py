from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain.exception import AuthenticationException
from services.shared.domain.value_object import AuthContext, UserId


def resolve_auth_context(event: APIGatewayProxyEvent) -> AuthContext:
    """Lambda Authorizer が付与したコンテキストから AuthContext を組み立てる

    Authorizer を経由していないリクエスト（userId 無し）は 401 とする。
    """
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    user_id = authorizer.get("userId")
    if not user_id:
        raise AuthenticationException()
    return AuthContext(
        user_id=UserId(value=str(user_id)),
        user_type=str(authorizer.get("userType") or "guest"),
    )

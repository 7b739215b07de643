from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain.exception import ValidationException


def require_path_parameter(event: APIGatewayProxyEvent, name: str) -> str:
    """パスパラメータを取得する（無ければ 400）"""
    value = (event.path_parameters or {}).get(name)
    if not value:
        raise ValidationException(name, f"{name} is required")
    return value

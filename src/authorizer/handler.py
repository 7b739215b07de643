import logging
import os

import boto3

from services.shared.utils.session import (
    InvalidSessionError,
    read_session_cookie,
    verify_session,
)

logger = logging.getLogger()
logger.setLevel(logging.INFO)

_secret_cache: str | None = None


def _get_secret() -> str:
    global _secret_cache
    if _secret_cache is None:
        client = boto3.client("secretsmanager")
        response = client.get_secret_value(SecretId=os.environ["SESSION_SECRET_ARN"])
        _secret_cache = response["SecretString"]
    return _secret_cache


def _cookie_header(headers: dict) -> str | None:
    for name, value in headers.items():
        if name.lower() == "cookie":
            return value
    return None


def _resource_arn(method_arn: str) -> str:
    """ステージ配下の全メソッドを対象にした ARN（認可結果をキャッシュするため）"""
    arn_parts = method_arn.split(":")
    region = arn_parts[3]
    account_id = arn_parts[4]
    api_gw_arn = arn_parts[5]
    rest_api_id = api_gw_arn.split("/")[0]
    stage = api_gw_arn.split("/")[1]
    return f"arn:aws:execute-api:{region}:{account_id}:{rest_api_id}/{stage}/*/*"


def lambda_handler(event, context):
    """セッション Cookie を検証する Lambda Authorizer

    検証に失敗した場合は "Unauthorized" を送出し、API Gateway が 401 を返す。
    """
    token = read_session_cookie(_cookie_header(event.get("headers") or {}))
    if token is None:
        logger.info("Session cookie is missing")
        raise Exception("Unauthorized")

    try:
        claims = verify_session(token, _get_secret())
    except InvalidSessionError as e:
        logger.info("Session rejected: %s", e)
        raise Exception("Unauthorized") from e

    user_id = str(claims["userId"])
    return {
        "principalId": user_id,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": "execute-api:Invoke",
                    "Effect": "Allow",
                    "Resource": _resource_arn(event["methodArn"]),
                }
            ],
        },
        "context": {
            "userId": user_id,
            "userType": str(claims.get("userType") or "guest"),
        },
    }

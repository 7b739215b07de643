import json
from collections.abc import Mapping


def api_response(
    status_code: int,
    body: dict | list,
    headers: Mapping[str, str] | None = None,
) -> dict:
    """API Gateway REST API (Lambda プロキシ統合) のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **(headers or {})},
        "body": json.dumps(body, default=str),
    }

from collections.abc import Iterator
from contextlib import contextmanager

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from services.shared.domain.exception import StorageUnavailableException


def get_table(table_name: str, timeout_seconds: float = 10.0):
    """タイムアウトとリトライ回数を制限した DynamoDB Table リソースを返す"""
    config = Config(
        connect_timeout=timeout_seconds,
        read_timeout=timeout_seconds,
        retries={"max_attempts": 2, "mode": "standard"},
    )
    dynamodb = boto3.resource("dynamodb", config=config)
    return dynamodb.Table(table_name)


def is_conditional_check_failure(error: ClientError) -> bool:
    return error.response["Error"]["Code"] == "ConditionalCheckFailedException"


@contextmanager
def translate_storage_errors(operation: str) -> Iterator[None]:
    """boto3 の例外を StorageUnavailableException に変換する"""
    try:
        yield
    except (BotoCoreError, ClientError) as e:
        raise StorageUnavailableException(f"DynamoDB {operation} failed: {e}") from e


def query_all(table, **kwargs) -> list[dict]:
    """ページングを辿って Query の全件を取得する"""
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key

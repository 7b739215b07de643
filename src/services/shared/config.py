import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from services.shared.domain.exception import ConfigurationException
from services.shared.domain.value_object import Currency

DEFAULT_CURRENCY = "USD"
DEFAULT_EXTERNAL_CALL_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Settings:
    """Lambda 実行環境の設定値"""

    table_name: str
    stripe_secret_key: str
    stripe_publishable_key: str | None
    currency: Currency
    external_call_timeout_seconds: float

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """環境変数から設定を読み込む

        TABLE_NAME と STRIPE_SECRET_KEY が無い場合はコールドスタート時点で失敗させる。
        """
        env = os.environ if environ is None else environ

        missing = [
            name for name in ("TABLE_NAME", "STRIPE_SECRET_KEY") if not env.get(name)
        ]
        if missing:
            raise ConfigurationException(
                f"Required environment variables are not set: {', '.join(missing)}"
            )

        try:
            currency = Currency(env.get("CURRENCY") or DEFAULT_CURRENCY)
            timeout = float(
                env.get("EXTERNAL_CALL_TIMEOUT_SECONDS")
                or DEFAULT_EXTERNAL_CALL_TIMEOUT_SECONDS
            )
        except ValueError as e:
            raise ConfigurationException(str(e)) from e

        return cls(
            table_name=env["TABLE_NAME"],
            stripe_secret_key=env["STRIPE_SECRET_KEY"],
            stripe_publishable_key=env.get("STRIPE_PUBLISHABLE_KEY") or None,
            currency=currency,
            external_call_timeout_seconds=timeout,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """コールドスタートごとに一度だけ設定を読み込む"""
    return Settings.from_env()

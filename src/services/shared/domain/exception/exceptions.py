class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値が不正な場合（定員超過・日付範囲など）

    field: 問題のあるフィールド名（"capacity", "dates" など）
    errors: フィールド単位のエラー詳細（任意）
    """

    def __init__(
        self, field: str, message: str, errors: list[dict] | None = None
    ) -> None:
        super().__init__(message)
        self.field = field
        self.errors = errors or []


class InvalidRangeException(ValidationException):
    """チェックアウト日がチェックイン日以前の場合"""

    def __init__(
        self, message: str = "Check-out date must be after check-in date"
    ) -> None:
        super().__init__("dates", message)


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    def __init__(self, resource: str, message: str | None = None) -> None:
        label = resource.replace("_", " ").capitalize()
        super().__init__(message or f"{label} not found")
        self.resource = resource


class AuthenticationException(DomainException):
    """セッションが無い・不正な場合"""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class PaymentNotCompleteException(BusinessRuleViolationException):
    """決済が完了していない状態で確認しようとした場合"""

    def __init__(self, status: str) -> None:
        super().__init__("Payment not completed")
        self.status = status


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class GatewayUnavailableException(DomainException):
    """決済代行サービスに到達できない場合（ネットワーク・5xx・タイムアウト）"""

    pass


class GatewayRejectedException(DomainException):
    """決済代行サービスがリクエストを拒否した場合（4xx）"""

    pass


class StorageUnavailableException(DomainException):
    """データストアへの読み書きに失敗した場合"""

    pass


class ConfigurationException(DomainException):
    """必須の環境設定が欠けている場合"""

    pass

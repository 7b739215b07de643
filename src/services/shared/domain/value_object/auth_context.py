from dataclasses import dataclass

from .user_id import UserId


@dataclass(frozen=True)
class AuthContext:
    """リクエスト境界で解決済みのセッション情報"""

    user_id: UserId
    user_type: str = "guest"

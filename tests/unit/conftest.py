import base64
import hashlib
import hmac
import json
import time

import pytest


@pytest.fixture
def sign_session():
    """認証サービスと同じ形式のセッショントークンを発行する Factory fixture"""

    def _factory(
        user_id: str, user_type: str, secret: str, ttl_seconds: int = 24 * 60 * 60
    ) -> str:
        claims = {
            "userId": user_id,
            "userType": user_type,
            "exp": int(time.time()) + ttl_seconds,
        }
        payload = base64.urlsafe_b64encode(json.dumps(claims).encode()).decode()
        signature = hmac.new(
            secret.encode(), payload.encode(), hashlib.sha256
        ).hexdigest()
        return f"{payload}.{signature}"

    return _factory

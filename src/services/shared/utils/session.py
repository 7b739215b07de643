import base64
import hashlib
import hmac
import json
import time

SESSION_COOKIE_NAME = "session"


class InvalidSessionError(Exception):
    """セッショントークンの形式・署名・有効期限が不正"""


def _sign(payload: str, secret: str) -> str:
    return hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()


def verify_session(token: str, secret: str, now: float | None = None) -> dict:
    """署名と有効期限を検証し、クレームを返す"""
    payload, _, signature = token.rpartition(".")
    if not payload or not signature:
        raise InvalidSessionError("Malformed session token")

    if not hmac.compare_digest(signature, _sign(payload, secret)):
        raise InvalidSessionError("Invalid session signature")

    padded = payload + "=" * (-len(payload) % 4)
    try:
        claims = json.loads(base64.urlsafe_b64decode(padded.encode()))
    except ValueError as e:
        raise InvalidSessionError("Malformed session payload") from e

    if not isinstance(claims, dict) or not claims.get("userId"):
        raise InvalidSessionError("Session has no user")
    exp = claims.get("exp")
    if not isinstance(exp, (int, float)) or isinstance(exp, bool):
        raise InvalidSessionError("Session has no expiry")
    if exp < (time.time() if now is None else now):
        raise InvalidSessionError("Session expired")
    return claims


def read_session_cookie(cookie_header: str | None) -> str | None:
    """Cookie ヘッダーからセッショントークンを取り出す"""
    if not cookie_header:
        return None
    for part in cookie_header.split(";"):
        name, _, value = part.strip().partition("=")
        if name == SESSION_COOKIE_NAME and value:
            return value
    return None

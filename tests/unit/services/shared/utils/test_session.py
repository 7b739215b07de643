import base64
import json
import time

import pytest

from services.shared.utils.session import (
    InvalidSessionError,
    read_session_cookie,
    verify_session,
)

SECRET = "test-session-secret"


class TestVerifySession:
    def test_valid_token_returns_claims(self, sign_session):
        token = sign_session("user-1", "guest", SECRET)

        claims = verify_session(token, SECRET)

        assert claims["userId"] == "user-1"
        assert claims["userType"] == "guest"

    def test_tampered_payload_is_rejected(self, sign_session):
        token = sign_session("user-1", "guest", SECRET)
        _, signature = token.split(".")
        forged = base64.urlsafe_b64encode(
            json.dumps({"userId": "admin", "exp": time.time() + 60}).encode()
        ).decode()

        with pytest.raises(InvalidSessionError, match="signature"):
            verify_session(f"{forged}.{signature}", SECRET)

    def test_wrong_secret_is_rejected(self, sign_session):
        token = sign_session("user-1", "guest", SECRET)

        with pytest.raises(InvalidSessionError, match="signature"):
            verify_session(token, "another-secret")

    def test_expired_token_is_rejected(self, sign_session):
        token = sign_session("user-1", "guest", SECRET, ttl_seconds=60)

        with pytest.raises(InvalidSessionError, match="expired"):
            verify_session(token, SECRET, now=time.time() + 120)

    @pytest.mark.parametrize("token", ["", "no-dot", ".signature-only"])
    def test_malformed_token_is_rejected(self, token):
        with pytest.raises(InvalidSessionError):
            verify_session(token, SECRET)


class TestReadSessionCookie:
    def test_reads_session_among_other_cookies(self):
        header = "theme=dark; session=abc.def; lang=ja"
        assert read_session_cookie(header) == "abc.def"

    def test_keeps_base64_padding_in_value(self):
        assert read_session_cookie("session=eyJ9==.sig") == "eyJ9==.sig"

    @pytest.mark.parametrize("header", [None, "", "theme=dark", "session="])
    def test_missing_cookie_returns_none(self, header):
        assert read_session_cookie(header) is None

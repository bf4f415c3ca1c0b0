"""Webhook signature verification tests."""

import time

import pytest
from jose import jwt

from qstash_client import Receiver, Settings, SignatureError
from qstash_client.receiver import body_hash

CURRENT_KEY = "sig_current_key"
NEXT_KEY = "sig_next_key"
URL = "https://example.com/api/hook"
BODY = b'{"hello":"world"}'


def sign(key: str = CURRENT_KEY, payload: bytes = BODY, url: str = URL, **overrides) -> str:
    now = int(time.time())
    claims = {
        "iss": "Upstash",
        "sub": url,
        "exp": now + 300,
        "nbf": now,
        "iat": now,
        "jti": "jwt_1",
        "body": body_hash(payload),
    }
    claims.update(overrides)
    return jwt.encode(claims, key, algorithm="HS256")


@pytest.fixture
def receiver() -> Receiver:
    return Receiver(CURRENT_KEY, NEXT_KEY)


class TestReceiver:
    """Test Receiver.verify."""

    def test_valid_signature(self, receiver):
        claims = receiver.verify(sign(), BODY, url=URL)
        assert claims["sub"] == URL

    def test_str_body(self, receiver):
        receiver.verify(sign(), BODY.decode(), url=URL)

    def test_next_key_accepted(self, receiver):
        """Deliveries signed with the next key verify during rotation."""
        receiver.verify(sign(key=NEXT_KEY), BODY, url=URL)

    def test_url_check_skipped_when_not_given(self, receiver):
        receiver.verify(sign(url="https://elsewhere.example.com"), BODY)

    def test_padded_body_hash_accepted(self, receiver):
        receiver.verify(sign(body=body_hash(BODY) + "="), BODY, url=URL)

    def test_unknown_key(self, receiver):
        with pytest.raises(SignatureError):
            receiver.verify(sign(key="someone_else"), BODY, url=URL)

    def test_tampered_body(self, receiver):
        with pytest.raises(SignatureError):
            receiver.verify(sign(), b'{"hello":"mallory"}', url=URL)

    def test_wrong_url(self, receiver):
        with pytest.raises(SignatureError):
            receiver.verify(sign(), BODY, url="https://example.com/other")

    def test_wrong_issuer(self, receiver):
        with pytest.raises(SignatureError):
            receiver.verify(sign(iss="NotUpstash"), BODY, url=URL)

    def test_expired(self, receiver):
        past = int(time.time()) - 600
        with pytest.raises(SignatureError):
            receiver.verify(sign(exp=past, nbf=past - 300, iat=past - 300), BODY, url=URL)

    def test_clock_tolerance(self, receiver):
        """A token that expired moments ago passes with enough leeway."""
        just_expired = int(time.time()) - 2
        token = sign(exp=just_expired, nbf=just_expired - 300, iat=just_expired - 300)
        receiver.verify(token, BODY, url=URL, clock_tolerance=30)

    def test_missing_signature(self, receiver):
        with pytest.raises(SignatureError, match="Missing"):
            receiver.verify("", BODY)

    def test_current_key_required(self):
        with pytest.raises(ValueError):
            Receiver("")

    def test_from_settings(self):
        settings = Settings(_env_file=None, current_signing_key=CURRENT_KEY, next_signing_key="")

        receiver = Receiver.from_settings(settings)

        assert receiver.current_signing_key == CURRENT_KEY
        assert receiver.next_signing_key is None

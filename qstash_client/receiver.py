"""Webhook signature verification.

QStash signs every delivery with a JWT in the ``Upstash-Signature`` header.
The token is HS256-signed with one of the account's signing keys and carries
the destination URL as ``sub`` and a SHA-256 hash of the body as ``body``.
Both the current and the next key are accepted, so receivers keep working
while keys are rotated.
"""

import base64
import hashlib
import hmac

from jose import JWTError, jwt

from .config import Settings, get_settings
from .errors import SignatureError
from .log import get_logger

ISSUER = "Upstash"

logger = get_logger("receiver")


def body_hash(body: bytes | str) -> str:
    """Unpadded base64url SHA-256 of a request body."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    digest = hashlib.sha256(body).digest()
    return base64.urlsafe_b64encode(digest).decode().rstrip("=")


class Receiver:
    """Verify incoming QStash deliveries."""

    def __init__(self, current_signing_key: str, next_signing_key: str | None = None):
        if not current_signing_key:
            raise ValueError("current_signing_key is required")
        self.current_signing_key = current_signing_key
        self.next_signing_key = next_signing_key

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Receiver":
        """Build a receiver from ``QSTASH_CURRENT_SIGNING_KEY``/``QSTASH_NEXT_SIGNING_KEY``."""
        settings = settings or get_settings()
        return cls(
            settings.current_signing_key.get_secret_value(),
            settings.next_signing_key.get_secret_value() or None,
        )

    def _verify_with_key(
        self,
        key: str,
        signature: str,
        body: bytes | str,
        url: str | None,
        clock_tolerance: int,
    ) -> dict:
        claims = jwt.decode(
            signature,
            key,
            algorithms=["HS256"],
            issuer=ISSUER,
            subject=url,
            options={"leeway": clock_tolerance, "verify_aud": False},
        )

        expected = body_hash(body)
        actual = str(claims.get("body", "")).rstrip("=")
        if not hmac.compare_digest(actual, expected):
            raise SignatureError("Body hash does not match")

        return claims

    def verify(
        self,
        signature: str,
        body: bytes | str,
        url: str | None = None,
        clock_tolerance: int = 0,
    ) -> dict:
        """
        Verify a delivery signature.

        Args:
            signature: Value of the ``Upstash-Signature`` header
            body: Raw request body
            url: Expected destination URL; skipped when None
            clock_tolerance: Seconds of leeway for ``exp``/``nbf``

        Returns:
            The verified JWT claims

        Raises:
            SignatureError: If neither signing key validates the request
        """
        if not signature:
            raise SignatureError("Missing signature")

        keys = [self.current_signing_key]
        if self.next_signing_key:
            keys.append(self.next_signing_key)

        last_error: Exception | None = None
        for key in keys:
            try:
                return self._verify_with_key(key, signature, body, url, clock_tolerance)
            except (JWTError, SignatureError) as e:
                last_error = e

        logger.warning("signature_rejected", error=str(last_error))
        raise SignatureError(f"Invalid signature: {last_error}") from last_error

"""Signing keys."""

from ..models.signing_keys import SigningKeys as SigningKeyPair
from .base import Resource


class SigningKeys(Resource):
    async def get(self) -> SigningKeyPair:
        return await self._http.request_model("GET", "/v2/keys", SigningKeyPair)

    async def rotate(self) -> SigningKeyPair:
        """Promote the next key to current and generate a new next key."""
        return await self._http.request_model("POST", "/v2/keys/rotate", SigningKeyPair)
